"""Interactive yes/no prompt backed by click.confirm."""

import click


class ClickPrompt:
    """Asks yes/no questions on the terminal."""

    def confirm(self, message, default=False):
        return click.confirm(message, default=default)
