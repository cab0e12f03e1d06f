# patternlab

A set of small design-pattern examples. Each example lives in its own module
and has a command that runs its demonstration scenario.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The examples

| Module                   | Pattern              | What it models                                                |
|--------------------------|----------------------|---------------------------------------------------------------|
| `patternlab.library`     | clean data modelling | Books and users in a library, with borrowing                  |
| `patternlab.observer`    | observer             | Door and smoke sensors that notify subscribers                |
| `patternlab.player`      | state                | A music player that moves between stopped, playing and paused |
| `patternlab.bank`        | singleton            | A process that may hold only one bank account                 |
| `patternlab.logger`      | singleton            | A shared logger with syslog-style severity levels             |
| `patternlab.sensors`     | factory method       | Temperature, humidity and light sensors made from a type      |
| `patternlab.uart`        | builder              | A UART configuration built step by step, with validation      |
| `patternlab.temperature` | adapter              | Two temperature chips behind one sensor interface             |
| `patternlab.facade`      | facade               | One smart-home object driving lighting, security and HVAC     |
| `patternlab.beverage`    | decorator            | Drinks whose description and price grow with each topping     |

### Library

`Library` keeps `Book` entries ordered by title (using `insert_sorted`) and
`User` entries in the order they were added. It offers `find_book_by_id`,
`find_book_by_title`, `find_user` and `remove_book`.
`Library.borrow_book_by_id(user_name, book_id, amount)` lends copies of a book
to a named user, lowering the book's quantity and adding one-copy entries to
the user's `borrowed_books`. It raises `UserNotFoundError`,
`BookNotFoundError` or `NotEnoughCopiesError` (all subclasses of
`BorrowError`) when the request cannot be met. `User.describe` returns the
user's details and borrowed books as text. Titles, authors and names are cut
to 99 characters.

### Observer

`DoorSensor` and `SmokeSensor` are `Publisher`s. `MobileAppNotifier` and
`AlarmSystemController` are `Subscriber`s that print each event; a plain
`Subscriber` can be given a callback instead. `Publisher.subscribe` accepts up
to ten subscribers and returns `False` once full; `Publisher.unsubscribe`
returns whether the subscriber was found. Each `trigger` call passes its
event text to every subscriber in subscription order.

### State

`MusicPlayer` delegates `click_play`, `click_pause` and `click_stop` to its
current `PlayerState` (`StoppedState`, `PlayingState` or `PausedState`),
which prints what happens and decides which state comes next. A new player
starts stopped unless given another state.

### Singletons

`create_bank_account` succeeds only once until `destroy_bank_account` is
called; a second attempt raises `AccountExistsError`. `current_bank_account`
returns the account in use, or `None`.

`get_logger` returns the one shared `Logger`, creating it on first use.
`set_log_level` sets which `LogLevel` messages are printed (it does nothing
before the logger exists), and `reset_logger` discards the shared instance.
`Logger.log(level, fmt, *args)` prints `[LEVEL] message` when the level
passes and returns the printed line, or `None` when it is filtered out.

### Factory method

`create_sensor` takes a `SensorType` and returns a new `TemperatureSensor`,
`HumiditySensor` or `LightSensor`, each offering `init` and `read_data`
with a fixed simulated reading. An unknown type raises `ValueError`.

### Builder

`UartBuilder` starts from 9600 baud, no parity, one stop bit and eight data
bits. Its setters return the builder so calls can be chained, and raise
`ValueError` for a baud rate outside 1200–115200, a parity other than
0, 1 or 2, stop bits other than 1 or 2, or data bits other than 8 or 9.
`build` returns a frozen `UartConfig`.

### Adapter

`Ds18b20Adapter` and `Lm75Adapter` present the simulated `Ds18b20` and
`Lm75` chips as a common `TemperatureSensor` with `name`, `unit`,
`min_value`, `max_value`, `last_read_time` and `read_temperature`. The
module-level `read_temperature` reads any such sensor and raises `TypeError`
when given `None`.

### Facade

`SmartHomeFacade` offers `activate_morning_routine`, `activate_away_mode`
and `set_movie_night_scene`, each a fixed sequence of calls on
`LightingSystem`, `SecuritySystem` and `HvacSystem`. Every action prints its
message; the scenes return the printed messages in order.

### Decorator

`plain_coffee` and `plain_tea` create a `Beverage`. `MilkDecorator`,
`SugarDecorator` and `PearlsDecorator` are `Topping`s; `Topping.apply` adds
the topping's name to the description and its cost to the price, and returns
the beverage.

## Running the demos

Each example has a command that runs its demonstration scenario and prints
the result:

```
patternlab-library
patternlab-observer
patternlab-player
patternlab-bank
patternlab-logger
patternlab-sensors
patternlab-uart
patternlab-temperature
patternlab-facade
patternlab-beverage
```

## What it does not do

The commands take no options and always run the same fixed scenario. All
state is held in memory: the library, accounts and logger are not saved
anywhere. The sensors are simulations that return fixed readings; nothing
talks to real devices.