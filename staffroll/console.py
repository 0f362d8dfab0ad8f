"""Validated line-oriented input for the interactive menus."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

_DIGITS = frozenset("0123456789")
_SEPARATORS = frozenset(".,")
_SPACES = frozenset(" \t\n\v\f\r")

EXHAUSTED_MESSAGE = "Intentos Agotados\n"
PAUSE_MESSAGE = "Presione una tecla para continuar . . . "


class RetriesExhausted(Exception):
    """Raised when the user keeps giving invalid answers past the retry limit."""

    def __init__(self, value: Any) -> None:
        super().__init__(EXHAUSTED_MESSAGE.strip())
        self.value = value


def _is_ascii_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_signed_digit(position: int, char: str) -> bool:
    return char in _DIGITS or (position == 0 and char == "-")


def is_int_text(text: str) -> bool:
    """True for a non-empty run of digits, optionally led by a minus sign."""
    return bool(text) and all(
        _is_signed_digit(position, char) for position, char in enumerate(text)
    )


def is_float_text(text: str) -> bool:
    """True for digits with at most one '.' or ',' and an optional leading minus sign."""
    if not text:
        return False
    if sum(char in _SEPARATORS for char in text) > 1:
        return False
    return all(
        char in _SEPARATORS or _is_signed_digit(position, char)
        for position, char in enumerate(text)
    )


def is_alphabetic(text: str) -> bool:
    """True for a non-empty string of ASCII letters only."""
    return bool(text) and all(_is_ascii_alpha(char) for char in text)


def is_alphabetic_with_spaces(text: str) -> bool:
    """True for a non-empty string of ASCII letters and whitespace."""
    return bool(text) and all(_is_ascii_alpha(char) or char in _SPACES for char in text)


def is_cuit(text: str) -> bool:
    """True when the text holds at least ten digits and exactly two dashes."""
    digits = sum(char in _DIGITS for char in text)
    dashes = text.count("-")
    return digits >= 10 and dashes == 2


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    # Only '.' is a decimal point; a comma ends the number.
    head = text.split(",", 1)[0]
    try:
        return float(head)
    except ValueError:
        return 0.0


def _write_stdout(text: str) -> None:
    print(text, end="", flush=True)


def _range_complaint(size: int, capital: bool = False) -> str:
    word = "Fuera" if capital else "fuera"
    return f"Error, {word} de rango -> Caracteres [MIN] = 1 [MAX] = {size} \n"


class Console:
    """Prompts the user and re-asks until the answer is valid.

    ``retries`` counts down once per re-read; when it reaches one and the
    answer is still invalid, :class:`RetriesExhausted` is raised. A value of
    one or less never reaches that point, so the prompt repeats without limit.
    """

    def __init__(
        self,
        input_func: Callable[[], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self._output = output_func if output_func is not None else _write_stdout

    def pause(self) -> None:
        """Wait for the user to press Enter."""
        self._output(PAUSE_MESSAGE)
        self._input()

    def _read_token(self) -> str:
        while True:
            parts = self._input().split()
            if parts:
                return parts[0]

    def _give_up(self, value: Any) -> None:
        self._output(EXHAUSTED_MESSAGE)
        self.pause()
        raise RetriesExhausted(value)

    def _retry(
        self,
        text: str,
        error_message: str,
        retries: int | None,
        is_valid: Callable[[str], bool],
        complaint: Callable[[str], str] | None = None,
    ) -> str:
        remaining = retries
        while not is_valid(text):
            if complaint is not None:
                self._output(complaint(text))
            self._output(error_message)
            text = self._input()
            if is_valid(text):
                break
            if remaining is not None:
                remaining -= 1
                if remaining == 1:
                    self._give_up(text)
        return text

    def _bounded(
        self,
        read: Callable[[], Any],
        accept: Callable[[Any], bool],
        complaint: str,
        retries: int,
    ) -> Any:
        value = read()
        remaining = retries
        while not accept(value):
            self._output(complaint)
            value = read()
            if accept(value):
                break
            remaining -= 1
            if remaining == 1:
                self._give_up(value)
        return value

    def read_int(self, message: str, error_message: str) -> int:
        """Ask for an integer, repeating until one is given."""
        self._output(message)
        text = self._retry(self._read_token(), error_message, None, is_int_text)
        return _to_int(text)

    def read_int_range(
        self, message: str, error_message: str, minimum: int, maximum: int, retries: int
    ) -> int:
        """Ask for an integer between ``minimum`` and ``maximum`` inclusive."""
        return self._bounded(
            lambda: self.read_int(message, error_message),
            lambda value: minimum <= value <= maximum,
            f"ERROR, Fuera de rango -> [MIN]={minimum} [MAX]={maximum}.\n",
            retries,
        )

    def read_positive_int(self, message: str, error_message: str, retries: int) -> int:
        """Ask for an integer that is zero or more."""
        return self._bounded(
            lambda: self.read_int(message, error_message),
            lambda value: value >= 0,
            "ERROR, Solo numeros positivos\n",
            retries,
        )

    def read_negative_int(self, message: str, error_message: str, retries: int) -> int:
        """Ask for an integer that is zero or less."""
        return self._bounded(
            lambda: self.read_int(message, error_message),
            lambda value: value <= 0,
            "ERROR, Solo numeros negativos\n",
            retries,
        )

    def read_float(self, message: str, error_message: str, retries: int) -> float:
        """Ask for a decimal number."""
        self._output(message)
        text = self._retry(self._read_token(), error_message, retries, is_float_text)
        return _to_float(text)

    def read_float_range(
        self,
        message: str,
        error_message: str,
        minimum: float,
        maximum: float,
        retries: int,
    ) -> float:
        """Ask for a decimal number between ``minimum`` and ``maximum`` inclusive."""
        return self._bounded(
            lambda: self.read_float(message, error_message, retries),
            lambda value: minimum <= value <= maximum,
            f"ERROR, Fuera de rango -> [MIN]={minimum:.2f} [MAX]={maximum:.2f}.\n",
            retries,
        )

    def read_char(self, message: str, error_message: str, retries: int) -> str:
        """Ask for a single letter."""
        self._output(message)
        text = self._retry(
            self._input(),
            error_message,
            retries,
            lambda answer: len(answer) == 1 and is_alphabetic(answer),
        )
        return text[0]

    def read_string(self, message: str, error_message: str, size: int, retries: int) -> str:
        """Ask for a string of 1 to ``size`` characters."""
        self._output(message)
        return self._retry(
            self._input(),
            error_message,
            retries,
            lambda answer: 0 < len(answer) <= size,
            lambda answer: _range_complaint(size, capital=True),
        )

    def _read_checked(
        self,
        message: str,
        error_message: str,
        size: int,
        retries: int,
        check: Callable[[str], bool],
        format_complaint: str,
    ) -> str:
        def fits(answer: str) -> bool:
            return 0 < len(answer) <= size

        self._output(message)
        return self._retry(
            self._input(),
            error_message,
            retries,
            lambda answer: fits(answer) and check(answer),
            lambda answer: format_complaint if fits(answer) else _range_complaint(size),
        )

    def read_alphabetic(self, message: str, error_message: str, size: int, retries: int) -> str:
        """Ask for 1 to ``size`` letters."""
        return self._read_checked(message, error_message, size, retries, is_alphabetic, "\n")

    def read_alphabetic_with_spaces(
        self, message: str, error_message: str, size: int, retries: int
    ) -> str:
        """Ask for 1 to ``size`` characters of letters and spaces."""
        return self._read_checked(
            message,
            error_message,
            size,
            retries,
            is_alphabetic_with_spaces,
            "Error, solo caracteres alfabeticos validos \n",
        )

    def read_cuil(self, message: str, error_message: str, size: int, retries: int) -> str:
        """Ask for a tax identifier shaped like XX-XXXXXXXX-X."""
        return self._read_checked(
            message,
            error_message,
            size,
            retries,
            is_cuit,
            "Error, solo formato [XX-XXXXXXXX-X] \n",
        )

    def read_dni(self, message: str, error_message: str, retries: int) -> str:
        """Ask for a national identity number of seven or eight digits."""
        self._output(message)
        return self._retry(
            self._input(),
            error_message,
            retries,
            lambda answer: 7 <= len(answer) <= 8 and is_int_text(answer),
        )

    def confirm(self, message: str, error_message: str, retries: int) -> bool:
        """Ask a yes/no question answered with 's' or 'n'."""
        choice = self.read_char(message, error_message, retries).upper()
        while choice not in ("S", "N"):
            self._output("Error, opcion no valida")
            choice = self.read_char(message, error_message, retries).upper()
        return choice == "S"