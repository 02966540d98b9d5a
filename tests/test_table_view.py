# tests/test_table_view.py

from __future__ import annotations

from sheet_tasks.tasks.task_models import Task
from sheet_tasks.view.page import render_page
from sheet_tasks.view.table_view import EMPTY_MESSAGE, TableView


def _task(i: int, title: str = "task", status: str = "pending") -> Task:
    return Task(id=i, title=title, status=status, created_at=f"10/18/26, 09:00:0{i}")


def test_empty_list_renders_single_placeholder_row() -> None:
    view = TableView()
    view.render([])

    assert len(view.rows) == 1
    assert view.rows[0].is_placeholder
    assert view.task_rows == ()
    assert 'colspan="4"' in view.markup
    assert EMPTY_MESSAGE in view.markup


def test_rows_follow_insertion_order_with_delete_controls() -> None:
    view = TableView()
    view.render([_task(3, "c"), _task(1, "a"), _task(2, "b")])

    assert [r.task_id for r in view.rows] == [3, 1, 2]
    assert [r.cells[0] for r in view.rows] == ["c", "a", "b"]
    assert 'data-id="1"' in view.rows[1].html
    assert "placeholder" not in view.markup


def test_script_title_renders_as_literal_text() -> None:
    view = TableView()
    view.render([_task(1, "<script>alert(1)</script>")])

    markup = view.markup
    assert "<script>" not in markup
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in markup
    # Text surfaces show exactly what the user typed.
    assert view.rows[0].cells[0] == "<script>alert(1)</script>"


def test_quotes_and_ampersands_are_escaped() -> None:
    view = TableView()
    view.render([_task(1, 'Tom & "Jerry" \'s')])
    assert "Tom &amp; &quot;Jerry&quot; &#x27;s" in view.markup


def test_rerender_replaces_previous_rows() -> None:
    view = TableView()
    view.render([_task(1), _task(2)])
    view.render([_task(2)])
    assert [r.task_id for r in view.rows] == [2]


def test_activate_delete_calls_bound_handler() -> None:
    view = TableView()
    deleted: list[int] = []
    view.bind(deleted.append)
    view.render([_task(1), _task(2)])

    assert view.activate_delete(2) is True
    assert deleted == [2]


def test_activate_delete_ignores_unrendered_ids() -> None:
    view = TableView()
    deleted: list[int] = []
    view.bind(deleted.append)
    view.render([_task(1)])

    assert view.activate_delete(99) is False
    assert deleted == []


def test_activate_delete_without_handler_is_a_noop() -> None:
    view = TableView()
    view.render([_task(1)])
    assert view.activate_delete(1) is False


def test_as_text_table() -> None:
    view = TableView()
    view.render([])
    assert view.as_text() == EMPTY_MESSAGE

    view.render([_task(1, "Buy milk")])
    lines = view.as_text().splitlines()
    assert lines[0].split() == ["ID", "Title", "Status", "Created"]
    assert "Buy milk" in lines[2]
    assert "pending" in lines[2]


def test_render_page_embeds_body_and_selector() -> None:
    view = TableView()
    view.render([_task(1, "<b>x</b>")])

    page = render_page(
        body_markup=view.markup,
        statuses=["pending", "done"],
        selected_status="done",
        app_title="My <Tasks>",
        message="Saved to Sheet",
        message_visible=True,
    )

    assert page.startswith("<!DOCTYPE html>")
    assert "&lt;b&gt;x&lt;/b&gt;" in page
    assert '<option value="done" selected>done</option>' in page
    assert '<option value="pending">pending</option>' in page
    assert "<title>My &lt;Tasks&gt;</title>" in page
    assert 'class="visible">Saved to Sheet<' in page
