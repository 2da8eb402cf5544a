# -*- coding: utf-8 -*-
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import gradio as gr

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from flight_results.adapters.source import JSONItinerarySource
from flight_results.container import get_container
from flight_results.domain import Column, Itinerary, SortKey, SourceError, ViewState
from flight_results.logging_setup import configure_logging
from flight_results.pipeline import toggle
from flight_results.ports.source import ItinerarySourcePort
from flight_results.services import ResultsViewService

configure_logging()
logger = logging.getLogger("flight_results.app")

CONTAINER = get_container()
SERVICE: ResultsViewService = CONTAINER.resolve(ResultsViewService)

# ============================ CONFIG ============================
SORT_CHOICES = [key.label for key in SortKey]

Itineraries = Tuple[Itinerary, ...]


def _initial_itineraries() -> Tuple[Itineraries, str]:
    source: ItinerarySourcePort = CONTAINER.resolve(ItinerarySourcePort)
    try:
        return source.load(), ""
    except SourceError as e:
        logger.warning("Sample itineraries unavailable", extra={"error": str(e)})
        return (), f"⚠️ {e}"


def _render(state: ViewState, itineraries: Itineraries, notice: str = "") -> Tuple[Any, ...]:
    view = SERVICE.view(state, itineraries)
    body = f"{notice}\n\n{view.rendered}" if notice else view.rendered
    return (
        body,
        view.state,
        gr.update(interactive=view.can_go_previous),
        gr.update(interactive=view.can_go_next),
    )


def load_file(file_path: Optional[str], state: ViewState) -> Tuple[Any, ...]:
    if not file_path:
        itineraries, notice = _initial_itineraries()
    else:
        try:
            itineraries = JSONItinerarySource(path=Path(file_path)).load()
            notice = f"📂 Loaded {len(itineraries)} itineraries"
        except SourceError as e:
            itineraries, notice = (), f"❌ {e}"
    return (itineraries, *_render(state.first_page(), itineraries, notice))


def change_sort(label: str, state: ViewState, itineraries: Itineraries) -> Tuple[Any, ...]:
    return _render(state.with_sort_key(label), itineraries)


def toggle_column(column: Column, state: ViewState, itineraries: Itineraries) -> Tuple[Any, ...]:
    return _render(state.with_visibility(toggle(state.visibility, column)), itineraries)


def _column_handler(column: Column):
    def handler(state: ViewState, itineraries: Itineraries) -> Tuple[Any, ...]:
        return toggle_column(column, state, itineraries)

    return handler


def next_page(state: ViewState, itineraries: Itineraries) -> Tuple[Any, ...]:
    return _render(state.next_page(), itineraries)


def previous_page(state: ViewState, itineraries: Itineraries) -> Tuple[Any, ...]:
    return _render(state.previous_page(), itineraries)


# ============================ UI ============================
with gr.Blocks(title="Flight Itineraries") as app:
    gr.Markdown("# ✈️ Flight Itineraries")

    initial_itineraries, initial_notice = _initial_itineraries()
    initial_view = SERVICE.view(ViewState(), initial_itineraries)

    itineraries_state = gr.State(initial_itineraries)
    view_state = gr.State(initial_view.state)

    with gr.Row():
        payload_file = gr.File(label="📂 Search payload (JSON)", file_types=[".json"], type="filepath")
        sort_dd = gr.Dropdown(SORT_CHOICES, value=SortKey.NONE.label, label="↕️ Sort")

    with gr.Accordion("🔎 Filters", open=False):
        column_boxes = {
            column: gr.Checkbox(value=True, label=column.label) for column in Column
        }

    results_md = gr.Markdown(
        f"{initial_notice}\n\n{initial_view.rendered}" if initial_notice else initial_view.rendered
    )

    with gr.Row():
        prev_btn = gr.Button("⬅️ Previous", interactive=initial_view.can_go_previous)
        next_btn = gr.Button("Next ➡️", interactive=initial_view.can_go_next)

    render_outputs = [results_md, view_state, prev_btn, next_btn]

    payload_file.change(
        load_file,
        inputs=[payload_file, view_state],
        outputs=[itineraries_state, *render_outputs],
    )
    sort_dd.change(
        change_sort,
        inputs=[sort_dd, view_state, itineraries_state],
        outputs=render_outputs,
    )
    for column, box in column_boxes.items():
        box.input(
            _column_handler(column),
            inputs=[view_state, itineraries_state],
            outputs=render_outputs,
        )
    prev_btn.click(
        previous_page,
        inputs=[view_state, itineraries_state],
        outputs=render_outputs,
    )
    next_btn.click(
        next_page,
        inputs=[view_state, itineraries_state],
        outputs=render_outputs,
    )


if __name__ == "__main__":
    app.launch()
