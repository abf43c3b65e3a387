# labworks

A handful of small console programs, each usable from the command line or
as a Python library. No third-party packages are needed.

## Installing

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## The programs

### War (`labworks-war`)

Two players, Gerald and Julie, share a 32-card deck (7 up to the Ace, in
four suits) and play a game of War. Each turn both players reveal the top
card of their pile; the player who revealed the lower card collects the
whole stake, shuffled, under their pile. A tie adds both cards to the stake
and the players reveal again. The game ends when a player has no card left
to play, or after a given number of turns:

    labworks-war        # play until someone runs out of cards
    labworks-war 10     # stop after ten turns

At the end the player holding more cards is announced as the winner.

In code, `Card` (`labworks.cards`) orders cards by rank alone, and
`Player` and `WarGame` (`labworks.war`) run the game. `WarGame` takes its
own random generator, output stream and pause function, so a game can be
replayed deterministically; `WarGame.deal_all_cards()`, `WarGame.play()`
and `WarGame.winner()` are the steps `labworks-war` goes through.

### Copyable pointer (`labworks-pointer`)

    labworks-pointer

Shows the life of `TrackedObject` values held by `CopyablePtr`
(`labworks.pointer`): creation, copying, moving, reassignment and
destruction, printing the expected message next to what actually happens.
A `CopyablePtr` can also be used as a context manager, which destroys the
object it owns on exit.

### Crafting inventory (`labworks-recipes`)

    labworks-recipes

An interactive prompt, read from standard input, that keeps an inventory
of materials and a book of recipes. Commands:

    m <name>                         add a material to the inventory
    l                                list the materials in the inventory
    r <m1> [<m2> ...] => <p1> [...]  register a recipe
    t                                list the recipes that can be made now
    p <id>                           try to produce the recipe with that id
    q                                quit

Names are made of ASCII letters and digits only. Recipes are numbered from
1 in the order they are registered. Producing a recipe takes each of its
materials from the inventory as it is found; if any are missing they are
reported on standard error and no product is added, otherwise the products
join the inventory. Malformed commands print an error and the usage text.
The prompt stops at `q` or at the end of input.

The same logic is available as `labworks.recipes.ProgramData`, and
`labworks.recipes_cli.run(lines, out, err)` drives the prompt from any
iterable of lines.

### Dungeon (`labworks-dungeon`)

    labworks-dungeon       # run until interrupted with Ctrl-C
    labworks-dungeon 20    # stop after twenty steps

A 50×10 room in which three characters wander at random, one step a
second, and two traps lie at random spots. A character that steps on a
trap dies, and the trap disappears once triggered. The screen is cleared
and redrawn each step, with the last two log lines underneath.

The pieces live in `labworks.entities` (`Character`, `Trap`, `Potion`,
`random_value`, `random_move`) and `labworks.dungeon` (`Dungeon`,
`fill_grid`, `render`, `trigger_interactions`, `remove_dead_entities`,
`collect_logs`). Potions, which heal a hurt character, can be placed in a
`Dungeon` from code; the command does not place any.

## What it does not do

There is no linked list of people and no object-counting tracker in this
package: nothing counts live objects or copies, and there is no command
walking through such a list.