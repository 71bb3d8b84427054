"""Comment bodies posted on the pull request.

Both messages embed the commit SHA so a re-run after a new push visibly
refreshes the comment even when the verdict is unchanged, and both end with
the signature used to find the comment again.
"""

from __future__ import annotations

import random
from urllib.parse import quote

from coolname import generate_slug

from changeset_check_core.models import PullRequestContext

_ABSENT_TEMPLATE = """\
###  💥  No Changeset
Latest commit: {commit_sha}

Merging this PR will not include it in the release notes of the next release. \
If this is a customer facing change, **please create a changeset for this PR.**

To add a changeset, follow these simple steps:

```
{add_command} // select "patch" for bugfixes, "minor" for features, and "major" for big overhauls/highlighted features.
```

After the changeset file was generated in the `{changeset_dir}` directory, open it in your editor \
and add any further changes you need. **Be as descriptive as possible.**
Then, simply commit and push the created changeset.

[Click here to learn what changesets are]({docs_url}).

[Click here if you're a maintainer who wants to add a changeset to this PR]({add_changeset_url})
{signature}"""

_APPROVE_TEMPLATE = """\
###  🦋  Changeset is good to go
Latest commit: {commit_sha}

**Thank you for adding a changeset.** This will help ensure our releases are predictable and of high quality.

Not sure what this means? [Click here to learn what changesets are]({docs_url}).
{signature}"""


def generate_changeset_name(words: int | None = None) -> str:
    """Return a random slug like ``brave-purple-otter`` (two or three words)."""
    if words is None:
        words = random.choice((2, 3))
    # coolname's three-word pattern can also yield "adj-noun-of-noun"; redraw those.
    while True:
        slug = generate_slug(words)
        if slug.count("-") == words - 1:
            return slug


def build_add_changeset_url(head_repo_url: str, head_ref: str, changeset_dir: str, name: str | None = None) -> str:
    """Link to GitHub's "new file" page on the PR's head branch, pre-filled with a changeset filename."""
    slug = name or generate_changeset_name()
    return f"{head_repo_url}/new/{quote(head_ref, safe='/')}?filename={changeset_dir.rstrip('/')}/{slug}.md"


def render_absent_message(
    commit_sha: str,
    add_changeset_url: str,
    *,
    add_command: str,
    docs_url: str,
    signature: str,
    changeset_dir: str = ".changeset",
) -> str:
    return _ABSENT_TEMPLATE.format(
        commit_sha=commit_sha,
        add_command=add_command,
        changeset_dir=changeset_dir.rstrip("/"),
        docs_url=docs_url,
        add_changeset_url=add_changeset_url,
        signature=signature,
    )


def render_approve_message(commit_sha: str, *, docs_url: str, signature: str) -> str:
    return _APPROVE_TEMPLATE.format(commit_sha=commit_sha, docs_url=docs_url, signature=signature)


def render_message(has_changeset: bool, context: PullRequestContext, config: dict) -> str:
    """Pick and render the approve or absent message for ``context``."""
    if has_changeset:
        return render_approve_message(
            context.commit_sha,
            docs_url=config["docs_url"],
            signature=config["signature"],
        )
    url = build_add_changeset_url(context.head_repo_url, context.head_ref, config["changeset_dir"])
    return render_absent_message(
        context.commit_sha,
        url,
        add_command=config["add_command"],
        docs_url=config["docs_url"],
        signature=config["signature"],
        changeset_dir=config["changeset_dir"],
    )
