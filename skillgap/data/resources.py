from types import MappingProxyType
from typing import Mapping
from urllib.parse import quote_plus
from pydantic import BaseModel, ConfigDict

from skillgap.utils.normalize import normalize_name


class LearningResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    type: str


def _resource(title: str, url: str, type_: str) -> LearningResource:
    return LearningResource(title=title, url=url, type=type_)


_SKILL_RESOURCES: Mapping[str, tuple[LearningResource, ...]] = MappingProxyType(
    {
        "html": (
            _resource("HTML Crash Course", "https://www.w3schools.com/html/", "tutorial"),
            _resource("MDN HTML Guide", "https://developer.mozilla.org/en-US/docs/Web/HTML", "documentation"),
        ),
        "css": (
            _resource("CSS Tutorial", "https://www.w3schools.com/css/", "tutorial"),
            _resource("Flexbox Guide", "https://css-tricks.com/snippets/css/a-guide-to-flexbox/", "article"),
        ),
        "javascript": (
            _resource("JavaScript.info", "https://javascript.info/", "tutorial"),
            _resource("MDN JavaScript", "https://developer.mozilla.org/en-US/docs/Web/JavaScript", "documentation"),
        ),
        "react": (
            _resource("React Official Tutorial", "https://reactjs.org/tutorial/tutorial.html", "tutorial"),
            _resource("React Docs", "https://react.dev/learn", "documentation"),
        ),
        "node.js": (
            _resource("Node.js Official Docs", "https://nodejs.org/en/docs/", "documentation"),
            _resource("Node.js Tutorial", "https://www.tutorialspoint.com/nodejs/", "tutorial"),
        ),
        "express": (
            _resource("Express.js Guide", "https://expressjs.com/en/starter/installing.html", "documentation"),
            _resource("Express Crash Course", "https://www.youtube.com/watch?v=L72fhGm1tfE", "video"),
        ),
        "mongodb": (
            _resource("MongoDB University", "https://university.mongodb.com/", "course"),
            _resource("MongoDB Docs", "https://docs.mongodb.com/", "documentation"),
        ),
        "git": (
            _resource("Git Tutorial", "https://www.atlassian.com/git/tutorials", "tutorial"),
            _resource("Git Cheat Sheet", "https://education.github.com/git-cheat-sheet-education.pdf", "cheatsheet"),
        ),
        "python": (
            _resource("Python Official Tutorial", "https://docs.python.org/3/tutorial/", "tutorial"),
            _resource("Python for Everybody", "https://www.py4e.com/", "course"),
        ),
        "sql": (
            _resource("SQL Tutorial", "https://www.w3schools.com/sql/", "tutorial"),
            _resource("SQLZoo", "https://sqlzoo.net/", "practice"),
        ),
    }
)

SEARCH_URL_TEMPLATE = "https://www.google.com/search?q={query}+tutorial"


def resources_for(skill_name: str) -> list[LearningResource]:
    known = _SKILL_RESOURCES.get(normalize_name(skill_name))
    if known:
        return list(known)
    label = (skill_name or "").strip()
    return [
        LearningResource(
            title=f"{label} Documentation",
            url=SEARCH_URL_TEMPLATE.format(query=quote_plus(label)),
            type="search",
        )
    ]
