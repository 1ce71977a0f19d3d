"""
Flask REST API for LineCalc Web Portal
Exposes calculator sessions as JSON endpoints
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
from session_manager import SessionManager
import config

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# Initialize components
session_manager = SessionManager()


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #1a1a2e; color: white;">
        <h1>{config.APP_NAME} API Server</h1>
        <p>API is running! Version {config.VERSION}</p>
        <h2>Available Endpoints:</h2>
        <ul>
            <li>POST /api/sessions - Start a new expression session</li>
            <li>GET /api/sessions/&lt;id&gt; - Current display and result</li>
            <li>DELETE /api/sessions/&lt;id&gt; - End a session</li>
            <li>POST /api/sessions/&lt;id&gt;/&lt;action&gt; - Apply one of:
                {', '.join(SessionManager.ACTIONS)}</li>
        </ul>
    </body>
    </html>
    """


def _session_not_found(session_id):
    return jsonify({'success': False, 'error': f"Unknown session: {session_id}"}), 404


@app.route('/api/sessions', methods=['POST'])
def create_session():
    """Start a new calculator session"""
    try:
        session = session_manager.create_session()
        return jsonify({
            'success': True,
            'data': session_manager.snapshot(session)
        }), 201
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/sessions/<session_id>', methods=['GET'])
def get_session(session_id):
    """Get the current state of a session"""
    try:
        session = session_manager.get_session(session_id)
        if session is None:
            return _session_not_found(session_id)
        return jsonify({
            'success': True,
            'data': session_manager.snapshot(session)
        })
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/sessions/<session_id>', methods=['DELETE'])
def delete_session(session_id):
    """End a session"""
    try:
        if not session_manager.delete_session(session_id):
            return _session_not_found(session_id)
        return jsonify({'success': True, 'data': None})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/sessions/<session_id>/<action>', methods=['POST'])
def apply_action(session_id, action):
    """Apply an input event (digit, operator, evaluate, ...) to a session"""
    try:
        session = session_manager.get_session(session_id)
        if session is None:
            return _session_not_found(session_id)

        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        try:
            state = session_manager.apply(session, action, payload.get('value'))
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e)}), 400

        return jsonify({
            'success': True,
            'data': state
        })
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


if __name__ == '__main__':
    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Portal API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}/api")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}/api")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
