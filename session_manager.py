"""
Session Manager for LineCalc
Gives every web client its own expression builder
"""
import threading
import uuid
from collections import OrderedDict

import config
from calculator import ExpressionBuilder


class Session:
    def __init__(self, session_id):
        self.id = session_id
        self.lock = threading.Lock()
        self.notification = None
        self.builder = ExpressionBuilder(on_evaluation_failed=self._notify)

    def _notify(self, message):
        self.notification = message

    def to_dict(self):
        """Snapshot of the session for JSON responses"""
        return {
            'session_id': self.id,
            'expression': self.builder.text,
            'display': self.builder.display_text(),
            'result': self.builder.result_text(),
            'notification': self.notification,
        }


class SessionManager:
    ACTIONS = ('clear', 'digit', 'dot', 'operator', 'backspace', 'square', 'evaluate')

    def __init__(self, max_sessions=config.MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions = OrderedDict()
        self._lock = threading.Lock()

    def create_session(self):
        """Create a new session, evicting the oldest when full"""
        session = Session(uuid.uuid4().hex)
        with self._lock:
            self._sessions[session.id] = session
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
        return session

    def get_session(self, session_id):
        with self._lock:
            return self._sessions.get(session_id)

    def delete_session(self, session_id):
        """Remove a session, returns False if it did not exist"""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def session_count(self):
        with self._lock:
            return len(self._sessions)

    def apply(self, session, action, value=None):
        """Apply one input event to a session and return its new state"""
        if action not in self.ACTIONS:
            raise ValueError(f"Unknown action: {action}")
        if action in ('digit', 'operator'):
            allowed = "0123456789" if action == 'digit' else config.OPERATORS
            if not isinstance(value, str) or len(value) != 1 or value not in allowed:
                raise ValueError(f"Invalid value for {action}: {value!r}")

        with session.lock:
            session.notification = None
            builder = session.builder
            if action == 'clear':
                builder.clear()
            elif action == 'digit':
                builder.append_digit(value)
            elif action == 'dot':
                builder.append_dot()
            elif action == 'operator':
                builder.append_operator(value)
            elif action == 'backspace':
                builder.backspace()
            elif action == 'square':
                builder.square_current()
            elif action == 'evaluate':
                builder.evaluate()
            return session.to_dict()

    def snapshot(self, session):
        with session.lock:
            return session.to_dict()
