"""
LineCalc
Main application entry point
"""
import tkinter as tk
import subprocess
import sys
import os
import socket
import atexit
import config
from gui import LineCalcGUI

API_SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'api.py')


def get_local_ip():
    """Best guess at this machine's LAN address"""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            # UDP connect sends nothing, it only picks the outgoing interface
            s.connect(('10.255.255.255', 1))
            return s.getsockname()[0]
    except OSError:
        return '127.0.0.1'


def print_portal_banner(pid):
    print(f"API server started (PID: {pid})")
    print("="*60)
    print(f"{config.APP_NAME} web API is live")
    print(f"Access on this PC:    http://localhost:{config.WEB_PORT}/api")
    print(f"Access on your Phone: http://{get_local_ip()}:{config.WEB_PORT}/api")
    print("="*60)


def start_api_server():
    """Launch api.py in a child process, returns None if it cannot start"""
    flags = subprocess.CREATE_NEW_CONSOLE if sys.platform == 'win32' else 0
    try:
        process = subprocess.Popen(
            [sys.executable, API_SCRIPT],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=flags,
        )
    except OSError as e:
        print(f"Failed to start API server: {e}")
        return None
    print_portal_banner(process.pid)
    return process


def stop_api_server(process):
    """Terminate the API child process if it is still running"""
    if process is None or process.poll() is not None:
        return
    try:
        process.terminate()
        process.wait(timeout=5)
        print("API server stopped")
    except (OSError, subprocess.TimeoutExpired) as e:
        print(f"Error stopping API server: {e}")


def main():
    api_process = start_api_server() if config.START_WEB_PORTAL else None
    # Covers exits that skip the normal shutdown below
    atexit.register(stop_api_server, api_process)

    root = tk.Tk()
    LineCalcGUI(root)
    root.mainloop()

    stop_api_server(api_process)


if __name__ == "__main__":
    main()
