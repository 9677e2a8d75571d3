from lsh.cli import app


def main():
    app(prog_name="lsh")


if __name__ == "__main__":
    main()
