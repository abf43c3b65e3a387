"""Interactive command loop over an inventory of materials and recipes."""

from __future__ import annotations

import re
import sys
from collections import deque

from labworks.recipes import ProgramData

_USAGE = "\n".join(
    [
        "Usage:",
        "\tm <nom>                                 : Ajoute le materiau donne a l'inventaire",
        "\tl                                       : Affiche les materiaux presents dans l'inventaire",
        "\tr <m1> [<m2> ...] => <p1> [<p2> ...]    : Enregistre la recette donnee",
        "\tt                                       : Affiche les recettes realisables avec "
        "l'inventaire actuel",
        "\tp <id>                                  : Tente de produire la recette demandee",
        "\tq                                       : Ferme le programme",
    ]
)


class _CommandError(Exception):
    """A command line that could not be understood."""


def usage_text():
    """The help shown after a malformed command."""
    return _USAGE


def parse_words(command):
    """Split a command into words.

    A command that ends in whitespace, or holds nothing but whitespace,
    gets an extra empty word at the end.
    """
    words = deque(command.split())
    if not command or command[-1].isspace():
        words.append("")
    return words


def pop_next(words):
    """Remove and return the first word, or an empty string if none is left."""
    return words.popleft() if words else ""


def is_valid_name(name):
    """A name is a non-empty run of ASCII letters and digits."""
    return bool(name) and name.isascii() and name.isalnum()


def consume_names(words):
    """Remove and return the leading valid names."""
    names = []
    while words and is_valid_name(words[0]):
        names.append(words.popleft())
    return names


def _leading_int(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _expect_end(words, action):
    extra = pop_next(words)
    if extra != "":
        raise _CommandError(f"Unexpected token '{extra}' while parsing '{action}' arguments")


def _commands(lines):
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        if line:
            yield line


def run(lines, out, err):
    """Execute commands read from ``lines`` until 'q' or the end of input."""
    data = ProgramData(out=out)
    commands = _commands(lines)
    try:
        while True:
            print("Entrez une commande :", file=out)
            command = next(commands, None)
            if command is None:
                break
            words = parse_words(command)
            action = pop_next(words)
            try:
                if _execute(action, words, data, out, err):
                    break
            except _CommandError as problem:
                print(problem, file=err)
                print(_USAGE, file=out)
    finally:
        data.close()
    return 0


def _execute(action, words, data, out, err):
    """Carry out one command; return True when the loop should stop."""
    if action == "m":
        name = pop_next(words)
        if not is_valid_name(name):
            raise _CommandError(f"'{name}' is not a valid material name")
        _expect_end(words, "m")
        data.add_material(name)
    elif action == "l":
        _expect_end(words, "l")
        for material in data.materials():
            print(material, file=out)
    elif action == "r":
        materials = consume_names(words)
        if not materials:
            raise _CommandError("No materials have been given")
        arrow = pop_next(words)
        if arrow != "=>":
            raise _CommandError(f"Unexpected token '{arrow}' while parsing recipe formula")
        products = consume_names(words)
        if not products:
            raise _CommandError("No products have been given")
        _expect_end(words, "r")
        data.register_recipe(materials, products)
    elif action == "t":
        _expect_end(words, "t")
        for recipe in data.doable_recipes():
            print(recipe, file=out)
    elif action == "p":
        arg = pop_next(words)
        recipe_id = _leading_int(arg)
        if recipe_id <= 0:
            raise _CommandError(f"'{arg}' is not a valid identifier")
        _expect_end(words, "t")
        result = data.produce(recipe_id)
        if result.recipe is None:
            print(f"No recipe is identified with {recipe_id}", file=err)
        elif result.missing_materials:
            print(
                f"Unable to produce '{result.recipe}' without the following materials :",
                file=err,
            )
            for name in result.missing_materials:
                print(name, file=err)
    elif action == "q":
        _expect_end(words, "q")
        return True
    else:
        raise _CommandError(f"Unknown command '{action}'")
    return False


def main(argv=None):
    """Run the command loop on standard input."""
    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())