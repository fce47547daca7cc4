#run: python -m investment_calculator   (PORT=3000 by default)

from investment_calculator.app import create_app
from investment_calculator.config import Settings


def main() -> None:
    settings = Settings.from_env()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
