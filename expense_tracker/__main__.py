import logging

from expense_tracker.app import create_app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["ENVIRONMENT"] == "development")


if __name__ == "__main__":
    main()
