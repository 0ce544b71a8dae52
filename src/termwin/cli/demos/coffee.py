"""Coffee machine demo: money, drink choice and a dispenser that swaps its button."""

from __future__ import annotations

from typing import Optional

from termwin.cli.core.manager import WindowManager
from termwin.cli.core.terminal import Surface
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.widgets import EXIT_TAG, Button, Element, Switch, Text
from termwin.core.theme import ColorScheme

NOTES = ("1", "2", "5", "10", "50", "100", "200", "500")

PRICES: dict[str, int] = {
    "Espresso": 25,
    "Double espresso": 45,
    "Americano": 35,
    "Cappuccino": 40,
    "Latte": 40,
}


class CoffeeMachine:
    """
    State and actions behind the coffee machine window.

    The dispenser shows one button at a time: Brew -> Wait -> Take.
    Each press adds the next button and removes itself, passing the new
    button as the focus replacement.
    """

    def __init__(self, app: WindowManager) -> None:
        self.app = app
        self.inserted = 0
        self.chosen: Optional[str] = None

        self.inserted_text = Text("Inserted: 0")
        self.choice_text = Text("Choose a drink")
        self.status_text = Text("Status: idle")
        self.note = Switch(NOTES)

        self.brew_button = Button("Brew", self.brew)
        self.wait_button = Button("Wait", self.wait)
        self.take_button = Button("Take drink", self.take)

    # -------------------------------------------------------------------------
    # Money
    # -------------------------------------------------------------------------

    def insert(self, button: Button) -> None:
        self.inserted += int(self.note.chosen)
        self.inserted_text.write(f"Inserted: {self.inserted}")

    def give_change(self, button: Button) -> None:
        self.inserted = 0
        self.inserted_text.reset()

    # -------------------------------------------------------------------------
    # Drinks
    # -------------------------------------------------------------------------

    def choose(self, drink: str) -> None:
        self.chosen = drink
        self.choice_text.write(f"Chosen: {drink}")

    def cancel(self, button: Button) -> None:
        self.chosen = None
        self.choice_text.reset()

    # -------------------------------------------------------------------------
    # Dispenser
    # -------------------------------------------------------------------------

    @staticmethod
    def _swap(current: Button, following: Button) -> None:
        window = current.window
        window.add(following)
        window.remove(current, following)

    def brew(self, button: Button) -> None:
        window = button.window
        if self.chosen is None:
            window.report_error("ERROR: no drink chosen")
            return
        price = PRICES[self.chosen]
        if self.inserted < price:
            window.report_error("ERROR: not enough money")
            return
        window.report_error("")

        self.inserted -= price
        self.inserted_text.write(f"Inserted: {self.inserted}")
        self.status_text.write(f"Status: brewing {self.chosen}")
        self._swap(button, self.wait_button)

    def wait(self, button: Button) -> None:
        self.status_text.write(f"Status: {self.chosen} is ready")
        self._swap(button, self.take_button)

    def take(self, button: Button) -> None:
        self.status_text.reset()
        self.chosen = None
        self.choice_text.reset()
        self._swap(button, self.brew_button)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def elements(self) -> list[Element]:
        elements: list[Element] = [
            Button("Exit", lambda button: self.app.set_running(None)).with_tag(EXIT_TAG),
            Text.skip(),
            Text("Bill acceptor"),
            Text.skip(),
            Text("Insert amount:"),
            self.note,
            Button("Insert", self.insert),
            Button("Return change", self.give_change),
            self.inserted_text,
            Text.skip(),
            Text("Drink selection"),
            Text.skip(),
            self.choice_text,
        ]
        for drink, price in PRICES.items():
            elements.append(Button(f"{drink}, {price}", lambda button, d=drink: self.choose(d)))
        elements += [
            Button("Cancel", self.cancel),
            Text.skip(),
            Text("Dispenser"),
            Text.skip(),
            self.status_text,
            self.brew_button,
        ]
        return elements


def build_coffee(
    app: WindowManager, theme: ColorScheme, props: WindowProps, surface: Surface
) -> Window:
    """Insert money, choose a drink and brew it."""
    machine = CoffeeMachine(app)
    return Window(theme, props, machine.elements(), surface=surface)
