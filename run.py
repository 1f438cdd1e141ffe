"""Entrypoint; PORT and HOST are read from the environment by greeter.config."""
from greeter.server import serve

if __name__ == "__main__":
    serve()
