"""NiceGUI chat page rendering a SessionController."""

from nicegui import ui

from velaris.chat.client import WebhookClient
from velaris.chat.controller import SessionController
from velaris.config import ChatConfig, get_chat_config
from velaris.ui.view import EMPTY_STATE_TEXT, TYPING_TEXT, Bubble, project

TAGLINE = "Receba ajuda personalizada e acelere sua criação de conteúdo."

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
      rel="stylesheet">
<link href="https://fonts.googleapis.com/icon?family=Material+Icons" rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f9fafb; min-height: 100vh; }

    .avatar { background: #2563eb; }

    .message-user {
        background: white;
        color: #111827;
        box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05);
        border-radius: 1rem;
    }

    .message-assistant {
        background: #2563eb;
        color: white;
        box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05);
        border-radius: 1rem;
    }

    .message-error { background: #fee2e2; color: #7f1d1d; border-radius: 1rem; }
    .message-system { background: #f3f4f6; color: #111827; border-radius: 1rem; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1s infinite;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.15s; }
    .typing-dot:nth-child(3) { animation-delay: 0.3s; }

    @keyframes bounce {
        0%, 100% { transform: translateY(0); }
        50% { transform: translateY(-6px); }
    }

    .input-box {
        border: 2px solid rgba(37, 99, 235, 0.2);
        border-radius: 9999px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #2563eb; }

    .send-btn { background: #2563eb !important; }
</style>
"""


def render_avatar(icon: str) -> None:
    with ui.element("div").classes(
        "w-10 h-10 rounded-full flex items-center justify-center avatar shrink-0"
    ):
        ui.icon(icon).classes("text-white text-2xl")


def render_bubble(bubble: Bubble) -> None:
    direction = "flex-row-reverse" if bubble.is_user else "flex-row"
    with ui.row().classes(f"w-full {bubble.align}"):
        with ui.row().classes(f"items-end gap-2 no-wrap {direction} max-w-[70%]"):
            render_avatar(bubble.avatar_icon)
            with ui.element("div").classes(f"p-4 {bubble.bubble_class}"):
                ui.html(bubble.html, sanitize=False).classes("text-sm leading-relaxed")


def render_typing_indicator() -> None:
    with ui.row().classes("w-full justify-start items-center gap-2"):
        render_avatar("chat_bubble")
        with ui.element("div").classes("message-user p-4"):
            with ui.row().classes("gap-2 items-center"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")
                ui.label(TYPING_TEXT).classes("sr-only")


def render_empty_state() -> None:
    with ui.column().classes("w-full h-32 items-center justify-center gap-4"):
        ui.icon("chat_bubble_outline").classes("text-5xl text-blue-600")
        ui.label(EMPTY_STATE_TEXT).classes("text-lg text-gray-500")


def render_header(title: str) -> None:
    with ui.column().classes("items-start gap-2"):
        ui.label(f"{title} 👑").classes("text-2xl font-bold")
        ui.label(TAGLINE).classes("text-gray-600")


def build_chat_page(controller: SessionController, config: ChatConfig) -> None:
    """Build the chat UI for one client and wire it to ``controller``."""
    ui.add_head_html(CUSTOM_CSS)

    scroll_area: ui.scroll_area
    messages_container: ui.column
    banner_container: ui.column
    send_btn: ui.button
    rendered_count = 0

    def render_error_banner(text: str) -> None:
        with ui.element("div").classes(
            "w-full rounded-lg border border-red-300 bg-red-50 text-red-900 p-4"
        ):
            with ui.row().classes("items-center gap-2"):
                ui.icon("error_outline").classes("text-lg")
                ui.label("Erro").classes("font-semibold")
            ui.label(text).classes("text-sm mt-1")
            ui.button(
                "Tentar novamente", icon="refresh", on_click=controller.retry
            ).props("outline size=sm color=red-9").classes("mt-2").mark("retry")

    def refresh() -> None:
        nonlocal rendered_count
        view = project(controller.state)

        messages_container.clear()
        with messages_container:
            if view.is_empty and not view.show_typing:
                render_empty_state()
            for bubble in view.bubbles:
                render_bubble(bubble)
            if view.show_typing:
                render_typing_indicator()

        banner_container.clear()
        if view.error_banner:
            with banner_container:
                render_error_banner(view.error_banner)

        send_btn.set_enabled(view.can_send)
        send_btn.props(f"icon={'hourglass_empty' if view.show_typing else 'send'}")

        if len(view.bubbles) != rendered_count:
            rendered_count = len(view.bubbles)
            scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        await controller.submit_pending()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen pt-4"),
        ui.column().classes("w-full max-w-[1800px] mx-auto p-8 gap-8"),
    ):
        render_header(config.title)

        # Transcript
        with ui.scroll_area().classes("w-full").style(
            "height: calc(100vh - 20rem)"
        ) as scroll_area:
            messages_container = ui.column().classes("w-full gap-4 p-6")

        # Error banner and input
        with ui.column().classes("w-full p-6 bg-white border-t gap-4"):
            banner_container = ui.column().classes("w-full")
            with ui.row().classes("w-full gap-2 items-center no-wrap"):
                with ui.element("div").classes("flex-grow input-box px-4"):
                    (
                        ui.input(placeholder="Digite sua mensagem...")
                        .props("borderless dense aria-label=Mensagem")
                        .classes("w-full")
                        .mark("message-input")
                        .bind_value(controller.state, "pending_input")
                        .on("keydown.enter", send_message)
                    )
                send_btn = (
                    ui.button(icon="send", on_click=send_message)
                    .props("round unelevated")
                    .classes("send-btn")
                    .mark("send")
                )

    controller.subscribe(refresh)
    refresh()


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each client gets its own session."""
    config = get_chat_config()
    build_chat_page(SessionController(WebhookClient(config)), config)
