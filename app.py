import logging
import streamlit as st

import ds_colors.figma_client as figma
import ds_colors.parser as parser
from ds_colors.header import HeaderConfig, convert_to_hex, export_colors
from ds_colors.publisher import Publisher, PublisherState

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

st.set_page_config(page_title="Design System Colors", layout="wide")

st.title("Figma Color Styles to Unreal Header")

# sidebar
with st.sidebar:
    st.header("Configuration")
    token = st.text_input("Figma Personal Access Token", type="password")
    file_url = st.text_input("Figma File URL")

    st.subheader("Export")
    excluded_text = st.text_area(
        "Excluded style prefixes (one per line)", value=parser.AVATAR_PREFIX)
    enum_type = st.text_input("Enum name", value=HeaderConfig.enum_type)
    class_name = st.text_input("Class name", value=HeaderConfig.class_name)
    generated_name = st.text_input("Generated header name", value=HeaderConfig.generated_name)
    category = st.text_input("Blueprint category", value=HeaderConfig.category)

    load_btn = st.button("Load File")


@st.cache_data(ttl=600)
def get_paint_styles(token, file_key):
    client = figma.FigmaClient(token)
    file_data = client.get_file(file_key)
    nodes_data = client.get_file_nodes(file_key, parser.paint_style_ids(file_data))
    return parser.local_paint_styles(file_data, nodes_data)


class StreamlitChannel:
    """
    UI side of the publisher. Streamlit reruns the script on every click,
    so everything the UI shows is kept in session state and drawn by render().
    """

    def show_ui(self):
        st.session_state['ui_open'] = True
        st.session_state.pop('closed_message', None)

    def post_message(self, message):
        st.session_state['ui_message'] = message

    def close(self, message):
        st.session_state['ui_open'] = False
        st.session_state['closed_message'] = message

    def render(self, publisher, file_name):
        if st.session_state.get('ui_open'):
            code = st.session_state['ui_message']['copyToClipboard']
            st.code(code, language='cpp')
            st.download_button(
                label=f"Download {file_name}",
                data=code,
                file_name=file_name,
                mime="text/x-c++hdr",
            )
            st.button("Copied", on_click=publisher.on_message, args=({"copied": True},))
        elif 'closed_message' in st.session_state:
            st.success(st.session_state['closed_message'])


if load_btn and token and file_url:
    file_key = figma.parse_file_key(file_url)
    if not file_key:
        st.error(f"Could not parse File ID from URL: {file_url}")
    else:
        with st.spinner(f"Fetching paint styles for ID: {file_key}..."):
            try:
                st.session_state['styles'] = get_paint_styles(token, file_key)
                st.session_state.pop('publisher', None)
                st.success("File loaded successfully!")
            except Exception as e:
                st.error(f"API Error: {e}")
                st.info("Check your **Personal Access Token** and **File URL**.")
                if "403" in str(e):
                    st.warning("403 Forbidden: Your token might be invalid or doesn't have access to this file.")
                if "404" in str(e):
                    st.warning("404 Not Found: The file ID might be wrong or the file was deleted.")

if 'styles' in st.session_state:
    styles = st.session_state['styles']
    exclude = parser.exclude_prefixes([line.strip() for line in excluded_text.splitlines()])
    config = HeaderConfig(
        enum_type=enum_type,
        class_name=class_name,
        generated_name=generated_name,
        category=category,
    )
    colors = parser.collect_colors(styles, exclude=exclude)

    tab1, tab2 = st.tabs(["Colors", "Header"])

    with tab1:
        st.header("Color Palette")
        if colors:
            cols = st.columns(5)
            for i, color in enumerate(colors):
                hex_code = "#" + convert_to_hex(color.color)[2:]
                with cols[i % 5]:
                    st.color_picker(color.name, hex_code, disabled=True, key=f"swatch-{i}")
                    st.code(color.enum_name)
        else:
            st.info("No solid color styles found.")

    with tab2:
        st.header("Generated Header")
        channel = StreamlitChannel()

        if st.button("Generate Code"):
            publisher = Publisher(channel)
            publisher.publish(export_colors(styles, exclude=exclude, config=config))
            st.session_state['publisher'] = publisher

        publisher = st.session_state.get('publisher')
        if publisher is not None and publisher.state in (PublisherState.AWAITING_ACK, PublisherState.CLOSED):
            channel.render(publisher, f"{config.generated_name}.h")
