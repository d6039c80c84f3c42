# vastestsea

Storage and JSON request handlers for a register of languages and of the
words that belong to each of them. Word names are unique within a
language, but the same word may be registered in several languages.

## Modules

- `vastestsea.models` – the `Language` and `Word` records. Each has a
  `to_json()` method returning a JSON-ready dict; timestamps are rendered
  in RFC 3339 form, and a word without formatting gets
  `"font_formatted": ""`.
- `vastestsea.database` – SQLite storage. `create_schema(conn)` creates
  the `languages` and `words` tables; `Queries(conn)` offers
  `create_language`, `delete_language`, `get_language` (matches the
  lower-cased stored name), `get_language_by_id`, `get_languages`,
  `create_word`, `create_formatted_word`, `delete_word`, `get_word`,
  `get_word_by_id`, `get_word_from_language`, `get_words`,
  `get_words_by_language_id` and `update_word_formatting`. Failures raise
  `DatabaseError`; a missing row raises `NotFoundError`, and a
  uniqueness violation raises `DuplicateKeyError`.
- `vastestsea.helpers` – `write_response`, `respond_success` and
  `respond_error` build `werkzeug` JSON responses
  (`application/json; charset=utf-8`); `failed_creation_code` gives 422
  for a duplicate and 500 for any other error.
- `vastestsea.handlers` – `ApiConfig(queries)`, whose methods take a
  `werkzeug` `Request` (plus any path values) and return a `Response`.

## Handlers

| Method of `ApiConfig`                               | Purpose                                   |
|-----------------------------------------------------|-------------------------------------------|
| `get_languages(request)`                            | List every language                       |
| `create_language(request)`                         | Create a language: `{"name": "Elvish"}`   |
| `get_language(request, language)`                   | Fetch one language (case-insensitive)     |
| `get_words_from_language(request, language)`        | List the words of a language              |
| `create_word_for_language(request, language)`       | Add a word to a language: `{"word": "…"}` |
| `get_word_from_language(request, language, word)`   | Fetch one word of a language              |
| `get_words(request)`                                | List every word in every language         |
| `create_word(request)`                              | Add a word: `{"word": "…", "language": "…"}` |
| `get_word(request, word)`                           | Every language's entry for a word         |

`create_word` creates the named language first if it does not exist yet.
Errors come back as `{"error": "<message>"}` with a matching status code.
Creating a language or word that already exists answers with
422 Unprocessable Entity; other creation failures answer with 500.

## Example

```python
import json
import sqlite3

from werkzeug.wrappers import Request

from vastestsea.database import Queries, create_schema
from vastestsea.handlers import ApiConfig

conn = sqlite3.connect(":memory:")
create_schema(conn)
api = ApiConfig(Queries(conn))

request = Request.from_values(
    method="POST",
    data=json.dumps({"word": "mellon", "language": "Elvish"}),
    content_type="application/json",
)
response = api.create_word(request)
print(response.status_code, response.get_json())
```

## What this package does not do

The package has no HTTP server, URL routing or command to start one:
it provides the storage layer and the handler methods, and it is up to
the caller to map URLs and methods onto `ApiConfig` and serve them with
a WSGI server of their choice. Storage is SQLite only.