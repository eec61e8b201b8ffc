"""Demo commands, one per prompt style."""

from enum import Enum

import click

from promptis.parsing import Count
from promptis.prompter import Prompter
from promptis.terminal import Terminal

QUIT_KEYWORD = "quit"


class Choice(Enum):
    """Answer to the dog question."""

    YES = "Yes"
    NO = "No"

    def __str__(self) -> str:
        return self.value


@click.command("data", help="Read a message and repeat it a number of times")
def data_cmd() -> None:
    terminal = Terminal()
    message = Prompter(terminal).set_prompt("Enter a message: ").read_until_valid(str)
    repeat = (
        Prompter(terminal)
        .set_error_message("That wasn't a number... try again")
        .set_prompt("Enter the number of times to repeat the message: ")
        .read_until_valid(Count)
    )
    for i in range(repeat):
        terminal.print_line(f"{i + 1}. {message}")


@click.command("reading", help="Read a number once, without retrying")
def reading_cmd() -> None:
    terminal = Terminal()
    number = Prompter(terminal).set_prompt("Enter a number: ").read_once(int)
    if number is None:
        terminal.print_line("That wasn't a number!")
    else:
        terminal.print_line(f"Your number is {number}")


@click.command("choose", help="Pick from a numbered list of options")
def choose_cmd() -> None:
    terminal = Terminal()
    choice = (
        Prompter(terminal)
        .set_quit(QUIT_KEYWORD)
        .choose_from_options(list(Choice), "Do you want to hear the dog speak?\nYour choice: ")
    )
    if choice is Choice.YES:
        terminal.print_line("Bark!")
    else:
        terminal.print_line("Awww ok :(")


@click.command("closing", help="Leave early by typing the quit keyword")
def closing_cmd() -> None:
    terminal = Terminal()
    terminal.print_line(f"Enter the phrase '{QUIT_KEYWORD}' to close the application early!")
    Prompter(terminal).set_quit(QUIT_KEYWORD).set_prompt("Enter: ").read_until_valid(str)
    terminal.print_line("Exiting normally - goodbye!")


@click.command("bounds", help="Answer yes/no questions")
def bounds_cmd() -> None:
    terminal = Terminal()
    if Prompter(terminal).confirm("Are you sure you want to continue?"):
        terminal.print_line("You continued")
    else:
        terminal.print_line("You didn't continue")

    if Prompter(terminal).confirm("Erase everything?"):
        terminal.print_line("Everything erased!")
    else:
        terminal.print_line("No action taken.")


@click.command("run", help="Collect a table of materials, quantities and units")
def run_cmd() -> None:
    terminal = Terminal()
    num_mats = Prompter(terminal).set_prompt("# of materials: ").read_until_valid(Count)

    ask = Prompter(terminal).set_quit(QUIT_KEYWORD).set_error_message("Unexpected input, please retry")
    data = []
    for _ in range(num_mats):
        material = ask.set_prompt("Material ID: ").read_until_valid(str)
        quantity = ask.set_prompt("Quantity: ").read_until_valid(float)
        unit = ask.set_prompt("Unit of Measure: ").read_until_valid(str)
        data.append((material, quantity, unit))

    for material, quantity, unit in data:
        terminal.print_line(f"Mat: {material} - Quantity: {quantity} - UoM: {unit}")
