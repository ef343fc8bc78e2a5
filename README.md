# devagent

`devagent` reads agents written as Markdown files with the `.devai`
extension, finds them in a `.devai/` folder at the root of a workspace,
lists them and creates new ones from templates.

It has no dependencies beyond the standard library and needs Python 3.11
or later.

## Install

```sh
pip install .
```

The tests need pytest:

```sh
pip install ".[test]"
pytest
```

## What it does not do

- It does not run agents. There is no script engine for the Lua blocks of an
  agent file and no client that sends prompts to a model. The `run` and
  `solo` sub-commands are accepted by the parser but stop with
  `The 'run' command is not available` (or `'solo'`) and exit status 1.
- It does not create the `.devai/` folder. `init` is accepted by the parser
  but is not available either. Create the folder, its `config.toml` and
  its template files yourself.
- It does not watch agent files for changes.

## The workspace folder

The command line looks for the closest `.devai/` folder, starting in the
current directory and moving up through its parents
(`devagent.devai_dir.find_workspace_dir`). When none is found it stops with
an error. Inside the folder:

| Path | Holds |
|------|-------|
| `config.toml` | the base agent configuration |
| `custom/command-agent/` | your own command agents (searched first) |
| `default/command-agent/` | the default command agents |
| `custom/new-template/command-agent/`, `default/new-template/command-agent/` | `default.devai` template for `devagent new` (custom first) |
| `custom/new-template/solo-agent/`, `default/new-template/solo-agent/` | `default.devai` template for `devagent new-solo` (custom first) |
| `doc/` | documentation |

`devagent.devai_dir.DevaiDir` gives each of these paths, for example
`DevaiDir.from_parent_dir("./work").get_config_toml_path()` is
`"./work/.devai/config.toml"`.

## Command line

```sh
devagent list                         # list the available command agents
devagent new my-cool-agent            # create .devai/custom/command-agent/my-cool-agent.devai
devagent new-solo ./src/notes.md      # create ./src/notes.md.devai
devagent ns ./src/notes.md            # same as new-solo
```

- `list` prints one line per agent file with its stem, its initials and its
  path. A file in `custom/` hides a file with the same stem in `default/`.
- `new` copies the `default.devai` template into
  `.devai/custom/command-agent/`, adding `.devai` to the name when it is
  missing. An existing file is left alone and a message says so.
- `new-solo` copies the solo template to the given path (adding `.devai`
  when missing), creating parent folders as needed. An existing file is
  left alone.
- `-o` / `--open` on `new` and `new-solo` opens the created file with the
  VSCode `code` command; `new-solo` also opens the target file when it
  exists.

Progress messages are printed on standard output, errors on standard error,
and the exit status is 1 when a command fails.

## The agent file

An agent file is Markdown. Top-level `#` headings open its sections, and
heading names are matched without regard to case:

- `# Config`: a `toml` code block that overrides `config.toml`
  (`[genai] model`, `[genai] temperature`, `[runtime] input_concurrency`).
- `# Before All`, `# Data`, `# Output`, `# After All`: a `lua` code block
  each, kept as text.
- `# Instruction` (or `# Inst`), `# System`, `# Assistant` (also `# Model`,
  `# Mind Trick`, `# Jedi Trick`): prompt parts, kept in file order with
  all their lines.

Headings inside code blocks are not treated as sections. An agent must end
up with a model, from `config.toml` or its own `# Config`; otherwise
`ModelMissingError` is raised.

````markdown
# Config

```toml
[genai]
model = "gpt-4o-mini"
temperature = 0.2
```

# Instruction

Proofread the following text.

# Output

```lua
return ai_response.content
```
````

## Using it from Python

```python
from devagent.agent import AgentConfig
from devagent.agent_doc import AgentDoc
from devagent.agent_locator import get_initials, get_solo_and_target_path

doc = AgentDoc.from_file("./agents/proof-read.devai")
agent = doc.into_agent("proof-read", AgentConfig(model="gpt-4o-mini"))
print(agent.config.model, [part.kind for part in agent.prompt_parts])
print(agent.data_script, agent.output_script)

solo_path, target_path = get_solo_and_target_path("./some/file.md")
# solo_path   -> ./some/file.md.devai
# target_path -> ./some/file.md

get_initials("proof-comments")  # -> "pc"
```

With a workspace, `devagent.agent_locator.find_agent(name, dir_context, mode)`
loads a command agent by `.devai` path, by file stem or by initials. When
nothing matches it raises `DevaiError` naming up to three close matches, or
listing every available agent. Build the context with
`DirContext.from_devai_dir(DevaiDir.from_parent_dir(workspace))`.

Other helpers:

- `devagent.literals.Literals.from_dir_context_and_agent` gives the context
  values of an agent (`WORKSPACE_DIR`, `DEVAI_DIR`, `AGENT_NAME`,
  `AGENT_FILE_PATH`, `AGENT_FILE_DIR`, `AGENT_FILE_NAME`,
  `AGENT_FILE_STEM`, `PWD`).
- `devagent.run_options` holds `RunCommandOptions`, `RunSoloOptions`,
  `RunBaseOptions` and `DryMode`; `RunCommandOptions.from_run_args` turns a
  bare file name such as `main.py` into the glob `**/main.py` and refuses
  inputs and files together.

Progress messages and errors are published on a shared hub. Subscribe to it
to follow what happens; each subscriber is a `queue.Queue` of `HubEvent`:

```python
from devagent.hub import get_hub

hub = get_hub()
subscriber = hub.subscribe()
hub.publish("hello")
event = subscriber.get_nowait()   # event.message == "hello"
hub.unsubscribe(subscriber)
```

All errors the package raises derive from `devagent.errors.DevaiError`.