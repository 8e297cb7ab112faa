import logging.config

import gradio as gr

from elementor_text_editor.handlers import (
    EXTRACT_TAB,
    REBUILD_TAB,
    RESULT_TAB,
    extract_fields_handler,
    rebuild_json_handler,
    round_trip_check_handler,
)

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

# --- UI Definition ---
with gr.Blocks(title="Elementor Text Editor") as demo:
    gr.Markdown("# Elementor JSON Text Editor")
    gr.Markdown("Extract the editable texts of an Elementor export, edit them, and rebuild the full JSON.")

    # State
    original_data_state = gr.State()

    with gr.Tabs(selected=EXTRACT_TAB) as tabs:
        with gr.Tab("1. Extract Fields", id=EXTRACT_TAB):
            original_input = gr.Textbox(
                label="Paste the original Elementor JSON",
                placeholder="Paste the JSON exported from Elementor here...",
                lines=16,
            )
            with gr.Row():
                extract_btn = gr.Button("Extract Editable Fields", variant="primary")
                check_btn = gr.Button("Check Round Trip")
            fields_output = gr.Code(label="Extracted editable fields", language="json", interactive=False)

        with gr.Tab("2. Fill & Rebuild", id=REBUILD_TAB):
            fields_input = gr.Code(label="Paste the field list with the new values", language="json", interactive=True)
            rebuild_btn = gr.Button("Rebuild Full JSON", variant="primary")

        with gr.Tab("3. Result", id=RESULT_TAB):
            rebuilt_output = gr.Code(label="Final JSON (ready to import into Elementor)", language="json", interactive=False)

    status_msg = gr.Textbox(label="Status", interactive=False)

    extract_btn.click(
        fn=extract_fields_handler,
        inputs=[original_input],
        outputs=[original_data_state, fields_output, status_msg, tabs],
    )

    # Pre-fill the rebuild input with the extracted list.
    fields_output.change(fn=lambda text: text, inputs=[fields_output], outputs=[fields_input])

    check_btn.click(
        fn=round_trip_check_handler,
        inputs=[original_data_state],
        outputs=[status_msg],
    )

    rebuild_btn.click(
        fn=rebuild_json_handler,
        inputs=[original_data_state, fields_input],
        outputs=[rebuilt_output, status_msg, tabs],
    )

if __name__ == "__main__":
    demo.launch()
