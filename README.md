# parchisgame

This package is the game model for a two-player Parchís variant. Each player
controls two colours. Player 0 has yellow and green. Player 1 has blue and red.
The package tracks:

- the pieces on the board;
- the dice layers;
- walls and safe boxes;
- eating, goal bounces and power bars.

It can also list every successor of a position, which a search agent needs.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

`parchisgame.pieces`
: `Color`, `BoxType`, `SpecialType`, the frozen `Box` dataclass and the `Piece` dataclass. It also has `partner_color`, which pairs yellow with green and blue with red.

`parchisgame.board_configs`
: `BoardConfig`, the named starting layouts, such as `ALL_AT_HOME`, `GROUPED` and `GROUPED2`. `pieces_for_config` builds fresh pieces for a layout. `ALTERNED`, `ALMOST_GOAL` and `DEBUG` define no layout and give an empty board.

`parchisgame.board`
: `Board`, which holds the pieces, the traps and the special items. Also `BoardTrap` and `TrapType`. `Board.delete_trap` raises `ValueError` when the given box has no trap on it.

`parchisgame.dice`
: `Dice`, the dice of each player, kept under the player's main colour (yellow or blue).
  - The default faces are 1, 2, 4, 5, 6 and the yin-yang face (30), which moves a piece one square.
  - `force_number` pushes a bonus layer, for example 10 or 20.
  - When the regular layer is empty, it is refilled.

`parchisgame.powerbar`
: `PowerBar`, which is capped at `MAX_POWER` (100).

`parchisgame.geometry`
: The safe boxes, and the entry and exit squares of each colour. It also has `distance_to_goal`, `distance_box_to_box` (which returns -1 when the target cannot be reached) and `compute_reverse_move`.

`parchisgame.queries`
: `BoardQueries`, which answers questions about a board:
  - box occupation;
  - pieces at goal and at home;
  - safe boxes;
  - walls and mega walls;
  - traps and pieces along a path.

`parchisgame.parchis`
: `Parchis`, the game state, built on `BoardQueries`. It covers:
  - legal moves, `move_piece` and skipping a turn with `SKIP_TURN`;
  - turn order and power bars;
  - the winner. An illegal move, a disconnection, more than 30 goal bounces or overthinking loses the game.
  - `copy` gives an independent state.

`parchisgame.successors`
: `generate_next_move_descending`, `children` and `children_list`. They enumerate the states that can be reached in one move, trying the dice from the last one down. Each result is a `Child` with `state`, `color`, `piece_id` and `dice_value`.

`parchisgame.gameloop`
: `game_loop`, `game_step` and `wait_for_players`. They drive a game between `Player` objects and print coloured progress to standard output.

`parchisgame.nodecounter`
: `NodeCounter` and the shared `get_node_counter()`. They count generated and evaluated nodes and the time spent thinking. The limits are 1,000,000 nodes and 60 seconds. The margins are 10,000 nodes and 1 second.

`parchisgame.heuristic`
: `Heuristic`, which wraps an evaluation function `f(state, player)` and counts each call. It raises `CheatingDetected` when an evaluation starts or stops out of order.

`parchisgame.player`
: `Player`, the abstract base class for agents.

## Example

```python
from parchisgame.board_configs import BoardConfig
from parchisgame.parchis import Parchis
from parchisgame.successors import children_list

game = Parchis(BoardConfig.GROUPED2)
color = game.current_main_color()
print(color, game.available_normal_dices(color))

for child in children_list(game):
    print(child.color, child.piece_id, child.dice_value)
```

To write an agent:

1. Subclass `Player` and implement `move()`.
2. Inside `move()`, call `self.game.move_piece(color, piece, dice)`. `self.game` is the game the player last perceived.
3. Build the game with `Parchis(config, players=[p1, p2])`.
4. Run `game_loop(game)`.

## What it does not do

The package is a library only. It has:

- no command-line program;
- no graphical board;
- no sound;
- no network play (remote players, servers or matchmaking);
- no ready-made AI player.

Agents, and any interface for human players, have to be written on top of `Player`.