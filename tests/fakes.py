"""Scripted stand-ins for the REST transport and sample API payloads."""

from impl.integrations.github.transport import Page, RestTransport


class FakeTransport(RestTransport):
    """Answers GETs from a path -> response table.

    A response is either a JSON value, a ``Page`` for paginated paths, or an
    exception instance which is raised instead.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self.closed = False

    def _answer(self, path, params):
        self.calls.append((path, params))
        if path not in self.responses:
            raise AssertionError(f"unexpected request to {path}")
        answer = self.responses[path]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def get_json(self, path, *, params=None):
        return self._answer(path, params)

    def get_page(self, path, *, params=None):
        return self._answer(path, params)

    def close(self):
        self.closed = True


def user_json(login="octocat", type_="User", email=None):
    return {
        "login": login,
        "type": type_,
        "avatar_url": f"https://avatars.example.com/{login}",
        "email": email,
        "id": 1,
    }


def repo_json(name, owner="octocat", private=False, fork=False, stars=0):
    return {
        "name": name,
        "full_name": f"{owner}/{name}",
        "clone_url": f"https://github.com/{owner}/{name}.git",
        "html_url": f"https://github.com/{owner}/{name}",
        "owner": user_json(owner),
        "private": private,
        "fork": fork,
        "stargazers_count": stars,
    }


def repo_pages(page_count, per_page):
    """Builds a chain of pages linked by next_path, keyed by request path."""
    pages = {}
    for n in range(page_count):
        path = "/user/repos" if n == 0 else f"https://api.github.com/user/repos?page={n + 1}"
        next_path = f"https://api.github.com/user/repos?page={n + 2}" if n + 1 < page_count else None
        items = [repo_json(f"repo-{n}-{i}") for i in range(per_page)]
        pages[path] = Page(items=items, next_path=next_path)
    return pages
