"""
Endpoint Decorators

Contains decorators shared by the HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed to the view as the ``game_service`` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500
        
        kwargs['game_service'] = game_service
        return f(*args, **kwargs)
    
    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events that carry a game_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return
        
        data = args[0] if args else None
        if not isinstance(data, dict) or not data.get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return
        
        if game_service.get_game_state(data['game_id']) is None:
            emit('error', {'error': 'Game not found'})
            return
        
        kwargs['game_service'] = game_service
        return f(*args, **kwargs)
    
    return decorated_function
