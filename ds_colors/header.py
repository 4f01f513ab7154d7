import math
from dataclasses import dataclass

from ds_colors.parser import collect_colors, is_avatar_color


@dataclass(frozen=True)
class HeaderConfig:
    enum_type: str = "EDsColorStyle"
    class_name: str = "UColorStyleMap"
    generated_name: str = "DsColorStyle"
    category: str = "Lsm|DesignSystem"


def round_half_up(v):
    # Same as Math.round for the non-negative values we get
    whole = math.floor(v)
    return whole + 1 if v - whole >= 0.5 else whole


def _to_byte(x):
    return round_half_up(x * 255)


def convert_to_hex(color):
    """
    Figma gives colors in 0-1 range.
    convert_to_hex({'r': 1, 'g': 0, 'b': 0}) -> '0xff0000'
    """
    return '0x{:02x}{:02x}{:02x}'.format(
        _to_byte(color['r']), _to_byte(color['g']), _to_byte(color['b']))


def alpha_to_byte(alpha):
    # Truncated, unlike the rgb channels
    return math.trunc(alpha * 255)


def make_color(color, alpha=None):
    if alpha is not None and alpha != 1:
        return f"_makeColor({convert_to_hex(color)}, {alpha_to_byte(alpha)})"
    return f"_makeColor({convert_to_hex(color)})"


def make_header(colors, config=None):
    """
    Render the Unreal header: an enum of the style names and a color table
    indexed by that enum. Enum entries and array initializers share the
    order of `colors`.
    """
    config = config or HeaderConfig()
    enum_type = config.enum_type

    enum_entries = "\n".join(
        f'    {c.enum_name} UMETA(DisplayName = "{c.string_name}"),' for c in colors)
    initializers = "\n".join(
        f"        {make_color(c.color, c.alpha)}, // {c.name}" for c in colors)

    template = f"""
#pragma once

#include "CoreMinimal.h"
#include "{config.generated_name}.generated.h"

UENUM(BlueprintType)
enum class {enum_type} : uint8 {{
{enum_entries}

    Max UMETA(DisplayName = "Max")
}};

UCLASS()
class {config.class_name} : public UBlueprintFunctionLibrary {{
    GENERATED_BODY()
public:
    /**
     * Get the color associated with the given style.
     */
    UFUNCTION(BlueprintPure, Category = "{config.category}")
    static FColor GetPaletteColor({enum_type} ColorStyle) {{
        check(ColorStyle != {enum_type}::Max);
        return _colors[static_cast<uint8>(ColorStyle)];
    }}

private:
    /**
     * Convert a hex color to a linear color.
     * Eg: _makeColor(0xff0000) -> FColor(1, 0, 0)
     */
    static constexpr FColor _makeColor(const uint32 hex, const uint8 alpha = 255) {{
        const uint8 red = (hex >> 16) & 0xFF;
        const uint8 green = (hex >> 8) & 0xFF;
        const uint8 blue = hex & 0xFF;
        return FColor(red, green, blue, alpha);
    }}

    /**
     * The list of colors by id;
     */
    static inline TArray<FColor, TInlineAllocator<static_cast<uint8>({enum_type}::Max)>> _colors = {{
{initializers}
    }};
}};
"""
    return template.strip() + "\n"


def export_colors(styles, exclude=is_avatar_color, config=None):
    """
    Collect the solid colors of the styles and render them as a header.
    """
    return make_header(collect_colors(styles, exclude=exclude), config)
