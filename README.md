# shellx

A small interactive shell for POSIX systems. It reads a line, prints the
tokens it finds in it, and then runs the commands on the line. Commands
joined with `|` run as a pipeline, and each one's output is passed to the
next.

## Installing

```
pip install .
```

## Running the shell

```
shellx
```

On start-up the shell runs `clear` and prints a banner. It then shows a
prompt. For each line you enter:

- The line is tokenized and each token is printed as
  `Token: <value> | Type: <number>`. Words, quoted strings (`"..."`, `'...'`)
  and the operators `|`, `<`, `>`, `<<` and `>>` are recognised.
- The line is checked. One that starts or ends with `|` or `;`, or has two
  of them in a row, is rejected with
  `Error: Invalid pipe or semicolon syntax`.
- The line is split on `|`. Each stage is split on spaces into arguments and
  run, with pipes between the stages. A stage that begins with `./name` is
  run as `bash name`.
- Commands are looked up on `PATH` unless the name itself is executable. A
  command that cannot be found prints `<name>: command not found`.

`exit`, or end of input (Ctrl-D), leaves the shell. Ctrl-C prints a newline
instead of stopping the shell, and Ctrl-\ is ignored.

## Using it as a library

```python
from shellx.tokenizer import tokenize, TokenType
from shellx.pipeline import is_valid_pipe_syntax, get_command, count_pipes

tokens = tokenize('grep "a b" < in.txt | wc -l')
[t.value for t in tokens]       # ['grep', 'a b', '<', 'in.txt', '|', 'wc', '-l']
tokens[2].type is TokenType.REDIR_IN

is_valid_pipe_syntax("ls | wc")  # True
count_pipes("a | b | c")         # 2
get_command("a | b | c", 1)      # 'b'
```

- `shellx.tokenizer`: `tokenize(text)` returns a list of `Token(value, type)`
  with `type` a `TokenType` (`WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`,
  `HEREDOC`, `APPEND`).
- `shellx.execute`: `find_command_path(name, env)` and
  `resolve_command(argv, env)` locate executables (the latter raises
  `CommandNotFoundError`). `bash_command(line)` and `command_argv(line)`
  prepare a command line. `run_command(line, env, stdin, stdout)` runs one
  command and returns its status: 0 for an empty line, 127 when the command
  is not found, 126 when it cannot be started, 128 plus the signal number
  when it is killed. `pipex(infile, outfile, first, second, env)` runs
  `< infile first | second > outfile`.
- `shellx.pipeline`: `run_pipeline(line, env)` runs a whole line and returns
  the last stage's status, or 2 on a syntax error.
- `shellx.builtins`: `echo(line, out)` writes each word on its own line (or
  back to back after a leading `-n`); `pwd(out)` writes the working
  directory; `cd(args, out)` changes directory from an argument vector: with
  two arguments it goes to `$HOME` and then its `minishell` subdirectory,
  with more it goes to `args[2]` and lists the new directory.
- `shellx.textutil`: `split_words(text, sep)`, `parse_int(text)` (C `atoi`
  rules) and `iter_lines(stream)`.

## What it does not do

The shell only runs external commands in pipelines. It does not:

- apply redirections: `<`, `>`, `<<` and `>>` are reported as tokens but are
  passed to commands as ordinary arguments;
- honour quotes when running commands: arguments are split on spaces only;
- run commands separated by `;` one after another: `;` is only checked by the
  syntax check;
- expand variables or wildcards;
- call the functions in `shellx.builtins`: `echo`, `pwd` and `cd` typed at
  the prompt run the external programs of that name, if any.

## Tests

```
pip install .[test]
pytest
```