# jobboard

A small job board driven by a command script. Company members post
recruitment notices, general members search them, apply to them and
cancel applications, and both kinds of member can view per-task
application statistics.

## Running

```
jobboard [INPUT] [OUTPUT]
```

`INPUT` is the command file (default `input.txt`) and `OUTPUT` is the
report file (default `output.txt`), both relative to the current
directory. The report file is overwritten. Running `jobboard` with no
arguments reads `input.txt` and writes `output.txt`.

## Input format

Each command starts with two menu numbers, followed by its arguments,
all separated by whitespace (line breaks do not matter).

| Menu  | Action                         | Arguments                                   |
|-------|--------------------------------|---------------------------------------------|
| `1 1` | Register a member              | type name number id password                |
| `1 2` | Withdraw the logged-in member  |                                             |
| `2 1` | Log in                         | id password                                 |
| `2 2` | Log out                        |                                             |
| `3 1` | Post a recruitment notice      | task number-of-personnel deadline           |
| `3 2` | List own recruitment notices   |                                             |
| `4 1` | Search notices by company name | company-name                                |
| `4 2` | Apply to a notice              | business-number                             |
| `4 3` | List own applications          |                                             |
| `4 4` | Cancel an application          | business-number                             |
| `5 1` | Show application statistics    |                                             |
| `6 1` | End the session                |                                             |

Member type `1` is a company member (name is the company name, number is
the business number); type `2` is a general member (name and resident
number). Any other menu pair, and the end of the input, also end the
session.

Example `input.txt`:

```
1 1 1 Acme B100 acme password
1 1 2 Kim R200 kim password
2 1 acme password
3 1 Backend 2 2030/01/31
2 2
2 1 kim password
4 1 Acme
4 2 B100
4 3
5 1
2 2
6 1
```

## What the commands do

- The report starts with a start line, then for each command a heading
  and its `> ...` result lines, and ends with a closing line.
- Logging in with unknown credentials leaves nobody logged in and prints
  a failure message on standard output instead of a result line.
- Applying (`4 2`) applies to the most recently posted notice of the
  company with that business number and counts one more applicant on it.
  If no company has that number, no application is recorded and an empty
  result line is written.
- Listing own notices (`3 2`) and own applications (`4 3`) orders them by
  company name; searching (`4 1`) shows the company's notices newest first.
- Cancelling (`4 4`) removes the first application to that business number.
- Statistics (`5 1`) show, per task in order of first appearance, the
  number of applications for a general member, or the total applicants
  of the company's notices for a company member.
- Commands that need a certain kind of member logged in raise `TypeError`
  otherwise; registering with a type other than `1` or `2` raises
  `ValueError`.

Creating members, notices and applications also prints a short line on
standard output.

## Using it from Python

- `jobboard.models` holds the domain objects: `CompanyMember`,
  `GeneralMember`, `RecruitInfo`, `ApplyInfo` and the detail/form
  dataclasses.
- `jobboard.server.Server(fin, fout)` holds the members, the logged-in
  member and the input and output streams.
- `jobboard.ui` has one interface class per command, which reads its
  arguments and writes its report lines.
- `jobboard.controllers` has one controller per command; each has a
  `run()` method.
- `jobboard.app.do_task(server)` runs a whole session against a server,
  and `jobboard.app.main(argv)` is the command-line entry point.

```python
import io
from jobboard.app import do_task
from jobboard.server import Server

out = io.StringIO()
do_task(Server(io.StringIO("1 1 1 Acme B100 acme password\n6 1\n"), out))
print(out.getvalue())
```

## What it does not do

Everything lives in memory for one session: members, notices and
applications are not stored anywhere and are gone when the session ends.
Passwords are kept and reported in plain text. There is no interactive
prompt; commands come only from the input stream.

## Tests

```
pip install -e ".[test]"
pytest
```