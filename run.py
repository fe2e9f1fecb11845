import os

from casebook import create_app

app = create_app()


def main():
    """Serve with waitress (production)."""
    from waitress import serve
    host = app.config.get('HOST', '127.0.0.1')
    port = app.config.get('PORT', 5000)
    app.logger.info('Starting waitress on %s:%d', host, port)
    serve(app, host=host, port=port, threads=app.config.get('THREADS', 4))


if __name__ == '__main__':
    if os.environ.get('FLASK_ENV') == 'production':
        main()
    else:
        app.run(debug=True, host='127.0.0.1', port=5000)
