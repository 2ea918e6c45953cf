from tambola import create_app, socketio

app = create_app()


def main():
    # Use SocketIO server to enable websockets in dev
    socketio.run(
        app,
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.config.get('DEBUG', False),
        allow_unsafe_werkzeug=app.config.get('ALLOW_UNSAFE_WERKZEUG', False),
    )


if __name__ == '__main__':
    main()
