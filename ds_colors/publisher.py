import enum
import logging

logger = logging.getLogger(__name__)

CLOSE_MESSAGE = "Code copied to clipboard"


class PublisherState(enum.Enum):
    IDLE = "idle"
    RENDERED = "rendered"
    AWAITING_ACK = "awaiting_ack"
    CLOSED = "closed"


class PublisherStateError(RuntimeError):
    pass


class Publisher:
    """
    Hands the generated code to a UI channel and closes the session once the
    UI acknowledges the copy.

    The channel needs three methods:
        show_ui()              open the UI surface
        post_message(message)  send a dict to the UI
        close(message)         end the session with a message for the user
    """

    def __init__(self, channel):
        self.channel = channel
        self.state = PublisherState.IDLE
        self.text = None

    def publish(self, text):
        if self.state is not PublisherState.IDLE:
            raise PublisherStateError(f"Cannot publish in state {self.state.value}")

        logger.info("%s", text)
        self.text = text
        self.state = PublisherState.RENDERED

        self.channel.show_ui()
        self.channel.post_message({"copyToClipboard": text})
        self.state = PublisherState.AWAITING_ACK

    def on_message(self, message=None):
        # Any message from the UI means the code was copied
        if self.state is not PublisherState.AWAITING_ACK:
            raise PublisherStateError(f"Unexpected message in state {self.state.value}")

        self.channel.close(CLOSE_MESSAGE)
        self.state = PublisherState.CLOSED

    @property
    def closed(self):
        return self.state is PublisherState.CLOSED
