# clinicqueue

A small waiting-room system for a clinic. It has two console programs, and they share state through two files in a data directory:

- **Totem** (`clinicqueue-totem`): the kiosk. Staff use it to start, pause or close service. Patients use it to take a ticket by choosing a priority and a specialty and typing their name. It can also print how many tickets were issued for each specialty during the session.
- **TV** (`clinicqueue-tv`): the display. Once a second it reads the most recently issued ticket and the service status. While service is running, it calls patients one at a time.

The on-screen text of both programs is in Brazilian Portuguese.

## Priorities

A lower priority number is called first. Tickets of the same priority are called in the order they were issued.

1. Pregnant (`Priority.PREGNANT`)
2. Elderly (`Priority.ELDERLY`)
3. Person with special needs (`Priority.SPECIAL_NEEDS`)
4. Child in arms (`Priority.INFANT`)
5. Chronic illness (`Priority.CHRONIC_ILLNESS`)
6. Other patients (`Priority.GENERAL`), the regular line

Tickets with priority 6 wait in the regular line. That line is served only when no ticket with priority 1 to 5 is waiting.

Each ticket gets a random service time of 1 to 10 seconds. After the display calls a ticket, it waits for that time before it calls the next one.

## Installation

```
pip install .
```

## Usage

Open two terminals and run one command in each:

```
clinicqueue-totem
```

```
clinicqueue-tv
```

Both commands take `--data-dir DIR`. The default is `arquivo` under the current directory. Start both programs with the same data directory. Two files are kept there:

- `configs_atend.dat` holds the service status and interval. If the file is missing, it is created with the defaults: status paused, interval 1.
- `configs_fila.dat` holds the last ticket issued.

Kiosk menu:

- `0`: exit. This also deletes the settings file.
- `1`: start service.
- `2`: pause service.
- `3`: close service.
- `4`: take a ticket. You choose a priority (1–6), then a specialty (1–6), then type a name. The kiosk then prints the ticket number.
- `5`: show the report, which is the number of tickets issued per specialty.

The kiosk also stops when its input runs out.

The display behaves as follows for each status:

- **Serving**: it shows the next ticket in the priority line and in the regular line, then calls the most urgent ticket.
- **Paused**: it prints a notice.
- **Closed**: it prints the final settings, deletes the ticket file and exits.

## Limitations

- Tickets pass from the kiosk to the display through a single record that each new ticket overwrites. The display checks it once a second. If two tickets are issued between two checks, only the later one reaches the display.
- Ticket numbers start at 1 each time the kiosk starts.
- The report is kept in the kiosk's memory only and is lost when the kiosk exits.
- The queues live only in the display's memory and are not saved.

## Using it as a library

- `clinicqueue.models`:
  - `Priority`, with `label()`.
  - `Specialty`.
  - `Ticket`, a frozen dataclass.
  - `new_ticket(number, priority, specialty, name, rng=None)`.
- `clinicqueue.waiting_queue`:
  - `WaitingQueue`, a first-in, first-out line with `push`, `pop`, `peek`, `after_first` and `clear`.
  - `encode_ticket` and `decode_ticket`, which convert between a ticket and a fixed-size binary record.
  - `TicketStore`, the ticket file, with `save`, `load` and `remove`.
- `clinicqueue.priority_tree`:
  - `PriorityTree`, a binary search tree with one line per priority, with `insert`, `find`, `minimum`, `remove_node`, `pop_next`, `peek_after_next`, `keys` and `clear`.
  - `PriorityNode`.
- `clinicqueue.service_config`:
  - `ServiceStatus`.
  - `ServiceConfig`, with `describe()`.
  - `ConfigStore`, with `load`, `save`, `update` and `remove`.
- `clinicqueue.totem`:
  - `Totem`, with `issue_ticket` and `run`. It accepts injectable input, output and random-number functions.
- `clinicqueue.tv`:
  - `Display`, with `receive`, `has_waiting`, `call_next`, `next_tickets`, `show_next` and `step`. It accepts injectable output and sleep functions.
  - `format_call`.

```python
from clinicqueue.models import Priority, Specialty, new_ticket
from clinicqueue.tv import Display

display = Display(sleep=lambda seconds: None)
display.receive(new_ticket(1, Priority.GENERAL, Specialty.OTHER, "Ana"))
display.receive(new_ticket(2, Priority.ELDERLY, Specialty.CARDIOLOGY, "Bruno"))
called = display.call_next()   # ticket 2: the priority line comes first
```

## Running the tests

```
pip install .[test]
pytest
```