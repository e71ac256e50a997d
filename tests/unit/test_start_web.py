"""Tests for the web API launcher."""

from unittest.mock import patch

import start_web


class TestStartWeb:
    """Test the uvicorn launcher."""

    def test_main_runs_web_app(self, capsys):
        """Should hand the web app import string to uvicorn."""
        with patch("start_web.uvicorn.run") as mock_run:
            start_web.main()

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == ("apps.web.main:app",)
        assert kwargs["port"] == 8000
        assert kwargs["reload"] is True
        assert kwargs["reload_dirs"] == ["apps", "depclash"]
        assert "http://localhost:8000/docs" in capsys.readouterr().out

    def test_main_without_reload(self):
        """Should skip reload directories when reload is off."""
        with patch("start_web.uvicorn.run") as mock_run:
            start_web.main(port=9000, reload=False)

        kwargs = mock_run.call_args.kwargs
        assert kwargs["port"] == 9000
        assert kwargs["reload"] is False
        assert kwargs["reload_dirs"] is None
