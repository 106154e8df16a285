from saavn_gateway import create_app
from saavn_gateway.src.config import Config


app = create_app()


def main():
    app.run(host="0.0.0.0", port=Config.PORT, debug=Config.DEBUG, threaded=True)


if __name__ == "__main__":
    main()
