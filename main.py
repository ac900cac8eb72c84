"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It loads the configuration, builds the Flask-SocketIO application and starts it.
"""

import os
from wordle_game import create_app
from wordle_game.config import config
from wordle_game.config.game_settings import get_word_statistics
from wordle_game.services.game_service import get_game_service
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]
    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_service = get_game_service()
        stats = get_word_statistics(game_service.vocabulary.answers)
        print(f"✓ Game service initialized with {stats['total_words']} answers "
              f"and {len(game_service.vocabulary)} accepted words")

        game_logger.logger.info(
            f"Wordle Server Starting - max_attempts={config_class.MAX_ATTEMPTS}, "
            f"match_policy={config_class.MATCH_POLICY}"
        )

        print(f"\nStarting Wordle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
