from __future__ import annotations

"""
Unit tests for the GUI BuildController.

Widgets are replaced with MagicMocks and the message boxes are patched, so
no display is required.

Verifies:
1. View to config synchronization through the validator.
2. Confirmation gate and thread launch on start_build.
3. Result reporting on the main thread.
"""

from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("tkinter")

from dircraft.domain.plan_models import BuildPlan, create_error_result, create_success_result  # noqa: E402
from dircraft.interface.gui import threads  # noqa: E402
from dircraft.interface.gui.controllers import build_controller  # noqa: E402
from dircraft.interface.gui.controllers.build_controller import BuildController  # noqa: E402

TREE = "demo/\n├── src/\n│   └── main.py\n└── README.md"
MB_PATH = "dircraft.interface.gui.controllers.build_controller.mb"


def _make_editor(tmp_path, structure=TREE, skip=False, dry_run=False):
    editor = MagicMock()
    editor.entry_output.get.return_value = str(tmp_path)
    editor.sw_skip_confirmation.get.return_value = 1 if skip else 0
    editor.sw_dry_run.get.return_value = 1 if dry_run else 0
    editor.get_structure.return_value = structure
    return editor


@pytest.fixture
def controller(tmp_path):
    app = MagicMock()
    ctrl = BuildController(app, {}, {"last_session": {}})
    ctrl.register_views(_make_editor(tmp_path), MagicMock())
    return ctrl


def test_sync_config_from_view(controller, tmp_path) -> None:
    controller.sync_config_from_view()

    assert controller.config["output_dir"] == str(tmp_path)
    assert controller.config["skip_confirmation"] is False
    assert controller.config["dry_run"] is False
    assert controller.config["last_structure"] == TREE


def test_start_build_declined_does_not_spawn(controller) -> None:
    with patch(MB_PATH) as mock_mb, patch.object(build_controller.threading, "Thread") as mock_thread:
        mock_mb.askyesno.return_value = False
        controller.start_build()

    mock_mb.askyesno.assert_called_once()
    mock_thread.assert_not_called()


def test_start_build_confirmed_spawns_worker(controller, tmp_path) -> None:
    with patch(MB_PATH) as mock_mb, patch.object(build_controller.threading, "Thread") as mock_thread:
        mock_mb.askyesno.return_value = True
        controller.start_build()

    mock_thread.assert_called_once()
    kwargs = mock_thread.call_args.kwargs
    assert kwargs["args"][0] == TREE
    assert kwargs["args"][1] == str(tmp_path)
    assert kwargs["args"][2] is False
    mock_thread.return_value.start.assert_called_once()
    controller.editor_view.btn_build.configure.assert_called_with(state="disabled", text="BUILDING...")


def test_start_build_skip_confirmation(tmp_path) -> None:
    ctrl = BuildController(MagicMock(), {}, {})
    ctrl.register_views(_make_editor(tmp_path, skip=True), MagicMock())

    with patch(MB_PATH) as mock_mb, patch.object(build_controller.threading, "Thread") as mock_thread:
        ctrl.start_build()

    mock_mb.askyesno.assert_not_called()
    mock_thread.assert_called_once()


def test_start_build_empty_structure_warns(tmp_path) -> None:
    ctrl = BuildController(MagicMock(), {}, {})
    ctrl.register_views(_make_editor(tmp_path, structure="   \n"), MagicMock())

    with patch(MB_PATH) as mock_mb, patch.object(build_controller.threading, "Thread") as mock_thread:
        ctrl.start_build()

    mock_mb.showwarning.assert_called_once()
    mock_thread.assert_not_called()


def test_preview_logs_plan(controller, caplog) -> None:
    with caplog.at_level("INFO"):
        controller.preview()

    assert "[FILE] demo/src/main.py" in caplog.text


def test_handle_thread_callback_uses_main_loop(controller) -> None:
    controller.handle_thread_callback("payload")
    controller.app.after.assert_called_once()
    assert controller.app.after.call_args[0][0] == 0


def test_process_result_success(controller, tmp_path) -> None:
    plan = BuildPlan(directories=["demo/"], files=["demo/a.txt"])
    with patch(MB_PATH) as mock_mb:
        controller.process_result(create_success_result(str(tmp_path), plan))

    mock_mb.showinfo.assert_called_once()
    assert "1 directories and 1 files" in mock_mb.showinfo.call_args[0][1]


def test_process_result_cancelled_is_silent(controller) -> None:
    with patch(MB_PATH) as mock_mb:
        controller.process_result(create_error_result("Operation cancelled.", ".", cancelled=True))

    mock_mb.showinfo.assert_not_called()
    mock_mb.showerror.assert_not_called()


def test_process_result_error_and_exception(controller) -> None:
    with patch(MB_PATH) as mock_mb:
        controller.process_result(create_error_result("Permission denied", "."))
        controller.process_result(RuntimeError("crash"))

    assert mock_mb.showerror.call_count == 2
    assert mock_mb.showerror.call_args_list[0][0][1] == "Permission denied"


def test_abort_build_sets_event(controller) -> None:
    controller.abort_build()
    assert controller._cancellation_event.is_set()


def test_confirmation_text_is_truncated(controller) -> None:
    controller.config["output_dir"] = "/out"
    files = [f"f{i}.txt" for i in range(40)]
    text = controller._confirmation_text(BuildPlan(paths=files, files=files))

    assert "- Files: 40" in text
    assert "(+15 more)" in text
    assert text.endswith("Do you want to create this structure?")


def test_abort_before_worker_start_reenables_buttons(controller, tmp_path) -> None:
    """An aborted worker still reports back, so the UI leaves its busy state."""
    controller.abort_build()
    controller.app.after.side_effect = lambda _delay, fn: fn()

    with patch(MB_PATH) as mock_mb:
        threads.run_build_task(
            TREE, str(tmp_path), False, controller.handle_thread_callback, controller._cancellation_event
        )

    controller.editor_view.btn_build.configure.assert_called_with(state="normal", text="BUILD")
    controller.editor_view.btn_preview.configure.assert_called_with(state="normal")
    mock_mb.showerror.assert_not_called()
    assert not (tmp_path / "demo").exists()
