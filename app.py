import logging

import gradio as gr

from env_vars_struct.handlers import (
    SOURCE_ENVIRONMENT,
    SOURCE_TABLE,
    build_preview,
    export_module_handler,
    load_names_file,
    resolve_config_handler,
    values_table_template,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

EXAMPLE_NAMES = "\n".join([
    "DATABASE.HOST",
    "DATABASE.PORT",
    "API.KEY",
    "API.SECRET",
    "CACHE.REDIS.URL",
    "HAT",
])

# --- UI Definition ---
with gr.Blocks(title="Env Vars Struct") as demo:
    gr.Markdown("# Env Vars Struct")
    gr.Markdown("Turn dotted variable names into nested config classes, preview the generated module, and resolve it.")

    with gr.Row():
        # Left Panel: Names
        with gr.Column(scale=1):
            gr.Markdown("### 1. Names")
            names_input = gr.Textbox(
                label="Dotted names (one per line, comma separated, or a JSON array)",
                value=EXAMPLE_NAMES,
                lines=10,
            )
            names_file = gr.File(label="Or upload a names file", file_types=[".txt", ".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)
            preview_btn = gr.Button("Build Schema", variant="primary")

            gr.Markdown("### 2. Namespace Tree")
            tree_view = gr.JSON(label="Tree")

        # Right Panel: Schema & Output
        with gr.Column(scale=1):
            gr.Markdown("### 3. Fields")
            mapping_table = gr.Dataframe(
                headers=["Source Key", "Field Path", "Record"],
                datatype=["str", "str", "str"],
                col_count=(3, "fixed"),
                interactive=False,
                label="Field Mapping",
            )

            gr.Markdown("### 4. Generated Module")
            source_view = gr.Code(label="Python", language="python", interactive=False)
            output_filename = gr.Textbox(label="Module Filename (optional)", placeholder="env_vars.py")
            export_btn = gr.Button("Export Module")
            download_output = gr.File(label="Download Module")

    with gr.Tab("Resolve"):
        gr.Markdown("Construct the config. A missing key aborts construction and is reported below.")
        source_selector = gr.Radio(
            choices=[SOURCE_ENVIRONMENT, SOURCE_TABLE],
            value=SOURCE_ENVIRONMENT,
            label="Value Source",
        )
        values_table = gr.Dataframe(
            headers=["Key", "Value"],
            datatype=["str", "str"],
            col_count=(2, "fixed"),
            interactive=True,
            label="Values table",
        )
        mask_values = gr.Checkbox(label="Mask values", value=True)
        resolve_btn = gr.Button("Resolve", variant="primary")
        resolve_status = gr.Textbox(label="Resolve Status", interactive=False)
        resolved_table = gr.Dataframe(
            headers=["Source Key", "Field Path", "Value"],
            datatype=["str", "str", "str"],
            col_count=(3, "fixed"),
            interactive=False,
            label="Resolved Values",
        )

    names_file.upload(
        fn=load_names_file,
        inputs=[names_file],
        outputs=[names_input, status_msg],
    )

    preview_btn.click(
        fn=build_preview,
        inputs=[names_input],
        outputs=[tree_view, mapping_table, source_view, status_msg],
    ).then(
        fn=values_table_template,
        inputs=[names_input, values_table],
        outputs=[values_table],
    )

    export_btn.click(
        fn=export_module_handler,
        inputs=[names_input, output_filename],
        outputs=[download_output, status_msg],
    )

    resolve_btn.click(
        fn=resolve_config_handler,
        inputs=[names_input, source_selector, values_table, mask_values],
        outputs=[resolved_table, resolve_status],
    )

if __name__ == "__main__":
    demo.launch()
