import asyncio
import unittest
from unittest.mock import AsyncMock, patch

from spellbee import main


class SocketEventTests(unittest.TestCase):
    def test_ping_answers_pong(self) -> None:
        with patch.object(main.sio, "emit", new=AsyncMock()) as emit:
            asyncio.run(main.on_ping("sid-1"))
        emit.assert_awaited_once_with("pong", to="sid-1")

    def test_reports_list_sends_current_lists(self) -> None:
        expected = main.app.state.context.reports.read_all()
        with patch.object(main.sio, "emit", new=AsyncMock()) as emit:
            asyncio.run(main.reports_list("sid-2"))
        emit.assert_awaited_once_with("reports:list", expected, to="sid-2")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
