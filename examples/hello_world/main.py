import logging
import sys
from dataclasses import dataclass

from markview import Effect, MarkupApp, ViewNode, custom, el, text


@dataclass(frozen=True)
class Rename:
    name: str


class Hello:
    name: str

    def __init__(self, name: str = "world") -> None:
        self.name = name

    def view(self) -> ViewNode:
        return text(f"Hello {self.name}")

    def update(self, msg: None) -> Effect | None:
        return None


class App:
    name: str

    def __init__(self) -> None:
        self.name = "world"

    def view(self) -> ViewNode:
        return el("div", {"id": "app", "tabindex": 0}, [custom(Hello(self.name))])

    def update(self, msg: Rename) -> Effect | None:
        match msg:
            case Rename(name):
                self.name = name
        return None


def main() -> None:
    logging.basicConfig(stream=sys.stdout, level=logging.DEBUG, format="%(message)s")

    app = MarkupApp[Rename](App(), target="body")
    app.main()
    app.dispatch(Rename("markview"))


if __name__ == "__main__":
    main()
