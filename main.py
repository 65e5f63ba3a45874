"""
Animal Wordle Server - Main Entry Point

This is the main entry point for the game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import os

from animal_wordle import create_app
from animal_wordle.config import config, validate_animal_list_integrity
from animal_wordle.services.game_service import initialize_game_service
from animal_wordle.services.hint_service import initialize_hint_service
from animal_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Initializing services...")

        validate_animal_list_integrity()

        hint_service = initialize_hint_service(config_class)
        if hint_service.is_configured():
            print("✓ Hint service initialized successfully")
        else:
            print("✗ ANIMAL_API_KEY not configured - hints fall back to a generic message")

        game_service = initialize_game_service(config_class, hint_service)
        print(f"✓ Game service initialized successfully ({len(game_service.word_store.get_all())} animals)")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Animal Wordle Server Starting")

        print(f"\nStarting Animal Wordle Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Database: {config_class.DATABASE_URL}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Animal Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
