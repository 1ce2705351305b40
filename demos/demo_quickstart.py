# demos/demo_quickstart.py
from solid_demos.runner.run_from_config import DEMO_ORDER, run_many


def main():
    # Every demo, one after another, with a header in between
    run_many(DEMO_ORDER, banner=True)


if __name__ == "__main__":
    main()
