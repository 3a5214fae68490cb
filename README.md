# making-mirrors

A command-line tool that keeps local bare mirrors of Git repositories from
several hosting providers. Use it for backups, for offline work, or to keep a
local cache of repositories you rely on.

Repositories are mirrored concurrently, one worker per CPU core. A repository
that has not been mirrored yet is cloned with `git clone --mirror`. One that
already exists is refreshed with `git remote update`. You need `git` on your
`PATH`.

## Installation

```
pip install .
```

## Usage

With the default locations:

```
making-mirrors
```

With your own registry file and output directory:

```
making-mirrors -input ./repos.txt -output ./mirrors
```

To show version information:

```
making-mirrors -version
```

Defaults:

- `-input`: `$HOME/Code/mirrors/registry.txt`
- `-output`: `$HOME/Code/mirrors`

Environment variables and a leading `~/` in either path are expanded.

## Registry format

Put one repository on each line, in the form `provider:owner/repo`. A trailing
`.git` on the repository name is optional. The tool skips empty lines and
lines that start with `#`. It also skips malformed lines, with a warning.

```
# my mirrors
github:torvalds/linux
gitlab:gitlab-org/gitlab
bitbucket:atlassian/stash
gitea:john/doerepo
codecommit:us-west-2/myrepo
azure:myorg/myproject
```

Supported providers: `github`, `gitlab`, `bitbucket`, `gitea`, `codecommit`
(the owner is the AWS region) and `azure`.

Each mirror is stored at `<output>/<provider>/<owner>/<repo>`.

## Library use

```python
from making_mirrors.registry import read_registry, parse_repository_line
from making_mirrors.mirror import mirror_all

repos = read_registry("repos.txt")
for result in mirror_all("./mirrors", repos, workers=4):
    print(result)
```