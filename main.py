"""
Daily Wordle Server - Main Entry Point

This is the main entry point for the game server.
It loads the word list, initializes the game service and starts the
Flask-SocketIO application.
"""

from daily_wordle import create_app
from daily_wordle.config import get_config, load_word_list, get_word_statistics
from daily_wordle.services.game_service import initialize_game_service
from daily_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        app_config = get_config()
        print("Initializing services...")

        word_list = load_word_list(app_config.WORD_LIST_PATH)
        stats = get_word_statistics(word_list)
        print(f"✓ Loaded {stats['total_words']} words")

        initialize_game_service(word_list)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(app_config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"Daily Wordle Server starting with {stats['total_words']} words")

        print(f"\nStarting Daily Wordle Server on {app_config.HOST}:{app_config.PORT}")
        print(f"Debug mode: {app_config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=app_config.HOST, port=app_config.PORT, debug=app_config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
