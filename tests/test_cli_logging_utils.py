from loguru import logger

from graphlit_mcp.cli.shared import logging_utils


def test_rotating_log_file_is_added_once(tmp_path) -> None:
    path = tmp_path / "nested" / "graphlit.log"
    try:
        first = logging_utils.ensure_rotating_log_file(path, level="DEBUG")
        second = logging_utils.ensure_rotating_log_file(path)
        assert first == second == path
        assert path.parent.is_dir()
        assert list(logging_utils._SINK_IDS).count(str(path)) == 1
    finally:
        sink_id = logging_utils._SINK_IDS.pop(str(path), None)
        if sink_id is not None:
            logger.remove(sink_id)


def test_bare_name_goes_under_log_dir(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(logging_utils, "LOG_DIR", tmp_path)
    try:
        assert logging_utils.ensure_rotating_log_file("server") == tmp_path / "server.log"
    finally:
        sink_id = logging_utils._SINK_IDS.pop(str(tmp_path / "server.log"), None)
        if sink_id is not None:
            logger.remove(sink_id)
