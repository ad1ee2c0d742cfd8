"""
Daily Word Game Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
"""

from dailyword import create_app
from dailyword.config import Config
from dailyword.services.game_service import initialize_game_service
from dailyword.services.word_service import WordServiceClient
from dailyword.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        
        word_client = WordServiceClient(
            Config.VALIDATE_WORD_URL,
            Config.WORD_OF_THE_DAY_URL,
            Config.REQUEST_TIMEOUT_SECONDS
        )

        initialize_game_service(word_client)
        print("✓ Game service initialized successfully")
        
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")
        
        game_logger.logger.info(
            f"Daily Word Server Starting - validate: {Config.VALIDATE_WORD_URL}, "
            f"word of the day: {Config.WORD_OF_THE_DAY_URL}"
        )
        
        print(f"\nStarting Daily Word Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Word Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
