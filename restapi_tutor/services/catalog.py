"""Static lesson catalog: the REST API levels of the tutorial.

Read-only reference data. Progress entries refer to levels by id but are never
checked against this list.
"""
from restapi_tutor.core.errors import NotFoundError
from restapi_tutor.schemas.level import LevelOutSchema, LevelSummarySchema

REST_API_LEVELS = [
    {
        "id": 1,
        "title": "What is a REST API?",
        "description": "Resources, URLs and the client/server split.",
        "tutorial_content": {
            "explanation": (
                "A REST API exposes resources (users, books, orders) at URLs. "
                "Clients act on them with standard HTTP methods and get back representations, usually JSON."
            ),
            "key_points": [
                "Everything is a resource with its own URL",
                "The server keeps no client session state between requests",
                "Representations are usually JSON",
            ],
            "walkthrough": [
                {"step": 1, "title": "Pick a resource", "detail": "Books live under /books.", "example": "/books"},
                {"step": 2, "title": "Address one item", "detail": "Append the id to reach a single book.", "example": "/books/42"},
                {"step": 3, "title": "Read the response", "detail": "The server answers with the book as JSON."},
            ],
        },
    },
    {
        "id": 2,
        "title": "GET: Reading Data",
        "description": "Fetch collections and single resources.",
        "tutorial_content": {
            "explanation": (
                "GET retrieves data without changing anything on the server. "
                "It is safe and idempotent: calling it twice gives the same result."
            ),
            "key_points": [
                "GET never modifies server state",
                "GET /books returns a list, GET /books/1 returns one item",
                "A missing item answers 404 Not Found",
            ],
            "walkthrough": [
                {"step": 1, "title": "List the collection", "detail": "Request every book.", "example": "GET /books"},
                {"step": 2, "title": "Fetch one item", "detail": "Request a book by id.", "example": "GET /books/1"},
                {"step": 3, "title": "Handle absence", "detail": "Ask for an id that does not exist and inspect the 404."},
            ],
        },
    },
    {
        "id": 3,
        "title": "POST: Creating Data",
        "description": "Send a body to create a new resource.",
        "tutorial_content": {
            "explanation": (
                "POST sends a JSON body to a collection URL and the server creates a new item, "
                "usually answering 201 Created with the stored representation."
            ),
            "key_points": [
                "POST targets the collection, not an item",
                "Set Content-Type: application/json",
                "Successful creation answers 201 Created",
            ],
            "walkthrough": [
                {"step": 1, "title": "Write the body", "detail": "Describe the new book.", "example": '{"title": "Dune"}'},
                {"step": 2, "title": "Send it", "detail": "POST the body to the collection.", "example": "POST /books"},
                {"step": 3, "title": "Check the status", "detail": "Expect 201 and the new id in the response."},
            ],
        },
    },
    {
        "id": 4,
        "title": "PUT and PATCH: Updating Data",
        "description": "Replace or partially modify an existing resource.",
        "tutorial_content": {
            "explanation": (
                "PUT replaces the whole resource with the body you send. "
                "PATCH changes only the fields you include."
            ),
            "key_points": [
                "PUT is a full replace and is idempotent",
                "PATCH is a partial update",
                "Updating a missing item answers 404",
            ],
            "walkthrough": [
                {"step": 1, "title": "Replace", "detail": "Send the complete book.", "example": "PUT /books/1"},
                {"step": 2, "title": "Patch", "detail": "Send only the changed title.", "example": "PATCH /books/1"},
                {"step": 3, "title": "Repeat the PUT", "detail": "Send the same PUT again and confirm nothing else changes."},
            ],
        },
    },
    {
        "id": 5,
        "title": "DELETE: Removing Data",
        "description": "Remove a resource and confirm it is gone.",
        "tutorial_content": {
            "explanation": "DELETE removes the resource at a URL. Success is usually 204 No Content.",
            "key_points": [
                "DELETE is idempotent",
                "204 No Content carries no body",
                "A later GET of the same URL answers 404",
            ],
            "walkthrough": [
                {"step": 1, "title": "Delete", "detail": "Remove a book.", "example": "DELETE /books/1"},
                {"step": 2, "title": "Verify", "detail": "GET the same URL and expect 404.", "example": "GET /books/1"},
            ],
        },
    },
    {
        "id": 6,
        "title": "Status Codes",
        "description": "What 2xx, 4xx and 5xx tell the client.",
        "tutorial_content": {
            "explanation": (
                "Every response carries a status code. 2xx means success, 4xx means the client "
                "must change the request, 5xx means the server failed."
            ),
            "key_points": [
                "200 OK, 201 Created, 204 No Content",
                "400 Bad Request, 401 Unauthorized, 404 Not Found",
                "500 Internal Server Error is never the client's fault",
            ],
            "walkthrough": [
                {"step": 1, "title": "Send a bad body", "detail": "POST invalid JSON and read the 400."},
                {"step": 2, "title": "Skip auth", "detail": "Call a protected route without a token and read the 401."},
            ],
        },
    },
    {
        "id": 7,
        "title": "Headers and Authentication",
        "description": "Bearer tokens and the Authorization header.",
        "tutorial_content": {
            "explanation": (
                "APIs identify callers with a token sent in the Authorization header. "
                "The server verifies the signature and expiry on every request."
            ),
            "key_points": [
                "Authorization: Bearer <token>",
                "Tokens expire and must be renewed by logging in again",
                "Never put credentials in the URL",
            ],
            "walkthrough": [
                {"step": 1, "title": "Log in", "detail": "Exchange email and password for a token.", "example": "POST /auth/login"},
                {"step": 2, "title": "Use the token", "detail": "Send it with a protected call.", "example": "GET /progress"},
            ],
        },
    },
    {
        "id": 8,
        "title": "Query Parameters and Pagination",
        "description": "Filter, sort and page through collections.",
        "tutorial_content": {
            "explanation": (
                "Query parameters narrow a collection without changing the resource URL. "
                "Large collections are returned in pages."
            ),
            "key_points": [
                "Filters go in the query string",
                "limit and offset (or page) control pagination",
                "The resource path stays the same",
            ],
            "walkthrough": [
                {"step": 1, "title": "Filter", "detail": "Ask only for one author's books.", "example": "GET /books?author=herbert"},
                {"step": 2, "title": "Page", "detail": "Fetch the second page of ten.", "example": "GET /books?limit=10&offset=10"},
            ],
        },
    },
]

_LEVELS_BY_ID = {level["id"]: LevelOutSchema(**level) for level in REST_API_LEVELS}


def list_levels() -> list[LevelSummarySchema]:
    return [
        LevelSummarySchema(id=level.id, title=level.title, description=level.description)
        for level in _LEVELS_BY_ID.values()
    ]


def get_level(level_id: int) -> LevelOutSchema:
    level = _LEVELS_BY_ID.get(level_id)
    if level is None:
        raise NotFoundError("Level not found")
    return level
