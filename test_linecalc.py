"""
Tests for the launcher helpers
"""
import subprocess
import unittest
from unittest import mock

try:
    import linecalc
except ImportError:  # tkinter is optional on headless builds
    linecalc = None


@unittest.skipIf(linecalc is None, "tkinter not available")
class TestLauncher(unittest.TestCase):
    def test_local_ip_falls_back_and_closes_socket(self):
        with mock.patch.object(linecalc.socket, 'socket') as socket_cls:
            sock = socket_cls.return_value
            sock.__enter__.return_value = sock
            sock.__exit__.return_value = False
            sock.connect.side_effect = OSError("network unreachable")
            self.assertEqual(linecalc.get_local_ip(), '127.0.0.1')
            self.assertTrue(sock.__exit__.called)

    def test_start_returns_none_when_launch_fails(self):
        with mock.patch.object(linecalc.subprocess, 'Popen', side_effect=OSError("boom")):
            self.assertIsNone(linecalc.start_api_server())

    def test_start_returns_the_process(self):
        process = mock.Mock(pid=4321)
        with mock.patch.object(linecalc.subprocess, 'Popen', return_value=process), \
                mock.patch.object(linecalc, 'get_local_ip', return_value='10.0.0.2'):
            self.assertIs(linecalc.start_api_server(), process)

    def test_stop_terminates_running_process(self):
        process = mock.Mock()
        process.poll.return_value = None
        linecalc.stop_api_server(process)
        process.terminate.assert_called_once_with()
        process.wait.assert_called_once_with(timeout=5)

    def test_stop_skips_exited_process(self):
        process = mock.Mock()
        process.poll.return_value = 0
        linecalc.stop_api_server(process)
        process.terminate.assert_not_called()
        linecalc.stop_api_server(None)

    def test_stop_reports_timeout(self):
        process = mock.Mock()
        process.poll.return_value = None
        process.wait.side_effect = subprocess.TimeoutExpired("api.py", 5)
        linecalc.stop_api_server(process)
        process.terminate.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
