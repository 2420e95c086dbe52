"""NiceGUI chat page bound to the process-wide turn controller."""

from nicegui import events, ui

from vchat.conversation.controller import get_turn_controller
from vchat.models.schemas import Message, MessageRole, UploadStatus

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: linear-gradient(135deg, #f1f5f9 0%, #eff6ff 100%); min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: #1d4ed8; }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #ffffff;
        color: #1f2937;
        border: 1px solid #e5e7eb;
        border-radius: 18px 18px 18px 4px;
    }

    .message-error { background: #fef2f2; color: #991b1b; border: 1px solid #fecaca; }
    .message-file { background: #fef9c3; color: #1f2937; border-radius: 12px; }

    .avatar-assistant { background: #1d4ed8; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


def bubble_class(msg: Message) -> str:
    """CSS class for a message bubble."""
    if msg.role is MessageRole.USER:
        return "message-user"
    if msg.role is MessageRole.FILE_NOTICE:
        return "message-file"
    if msg.is_error:
        return "message-assistant message-error"
    return "message-assistant"


@ui.page("/")
async def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    controller = get_turn_controller()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role is MessageRole.USER
        align = "justify-end" if is_user else "justify-start"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if msg.role is MessageRole.ASSISTANT:
                with ui.element("div").classes(
                    "w-9 h-9 rounded-full flex items-center justify-center avatar-assistant"
                ):
                    ui.label("AI").classes("text-white text-xs font-semibold")
            with ui.column().classes("max-w-[80%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble_class(msg)}"):
                    if msg.role is MessageRole.ASSISTANT and not msg.is_error:
                        ui.markdown(msg.text).classes("text-sm leading-relaxed")
                    else:
                        ui.label(msg.text).classes("text-sm leading-relaxed whitespace-pre-wrap")
                ui.label(msg.created_at.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )

    def render_typing_indicator() -> None:
        with ui.row().classes("items-center gap-2 ml-2"):
            with ui.row().classes("gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")
            ui.label("Bot is typing...").classes("text-sm text-gray-500 italic")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            messages = controller.snapshot()
            if not messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("Start a conversation").classes("text-lg text-gray-400")
            for msg in messages:
                render_message(msg)
            if controller.busy:
                render_typing_indicator()
        send_btn.set_enabled(not controller.busy)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or controller.busy:
            return
        input_field.value = ""
        await controller.send(text)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        upload.reset()
        data = await e.file.read()
        result = await controller.upload(e.file.name, data, e.file.content_type)
        if result.status is UploadStatus.FAILED:
            ui.notify(f"Could not read {result.filename}", type="warning")

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-2xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        with ui.row().classes("w-full header px-5 py-4 items-center justify-center"):
            ui.label("VChat Bot").classes("text-2xl font-bold text-white tracking-wide")

        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            messages_container = ui.column().classes("w-full p-5 gap-4")

        with ui.row().classes("w-full p-4 gap-2 items-center bg-white border-t"):
            input_field = (
                ui.input(placeholder="Type your message...")
                .props("outlined dense rounded")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button("Send", on_click=send_message).props("unelevated rounded")
            upload = (
                ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                .props('accept="application/pdf" flat label="Upload PDF"')
                .classes("max-w-40")
            )

    refresh_messages()
    controller.add_listener(refresh_messages)
    ui.context.client.on_disconnect(lambda: controller.remove_listener(refresh_messages))
