"""
WebSocket Event Handlers

Carries browser keydown events in and state/dialog updates out, one
Socket.IO room per game.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..services.game_service import get_game_service


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def broadcast_state(game_id, state):
        """Send a state to the game's room, plus the dialog if one is raised."""
        socketio.emit('game_state_update', {
            'success': True,
            'game_id': game_id,
            'state': state.to_dict()
        }, room=_room(game_id))
        if state.message:
            socketio.emit('dialog', {
                'game_id': game_id,
                'message': state.message
            }, room=_room(game_id))

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and join its room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = game_service.create_new_game()
        join_room(_room(game_id))

        game_logger.logger.info(f"WebSocket: {request.sid} started game {game_id}")

        emit('game_created', {
            'success': True,
            'game_id': game_id,
            'state': game_service.get_game_state(game_id).to_dict()
        })

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Join an existing game's room, e.g. after a reconnect."""
        game_id = data['game_id']
        join_room(_room(game_id))
        emit('game_state_update', {
            'success': True,
            'game_id': game_id,
            'state': game_service.get_game_state(game_id).to_dict()
        })

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None):
        leave_room(_room(data['game_id']))

    @socketio.on('keydown')
    @websocket_game_required
    def handle_keydown(data, game_service=None):
        """Apply one key; a submission streams every intermediate state."""
        game_id = data['game_id']
        key = data.get('key')
        if not isinstance(key, str) or not key:
            emit('error', {'error': 'Key is required'})
            return

        try:
            outcome = game_service.press_key(
                game_id, key,
                on_change=lambda state: broadcast_state(game_id, state)
            )
        except Exception as e:
            game_logger.log_error(request, e, 'keydown', game_id)
            emit('error', {'error': str(e)})
            return

        if outcome is None:
            emit('error', {'error': 'Game not found'})
            return

        emit('key_result', {
            'game_id': game_id,
            'action': outcome.action.value,
            'prevent_default': outcome.prevent_default
        })

    @socketio.on('dismiss_dialog')
    @websocket_game_required
    def handle_dismiss_dialog(data, game_service=None):
        game_id = data['game_id']
        state = game_service.dismiss_message(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return
        broadcast_state(game_id, state)
