# scrape

A small command-line tool that fetches a web page and prints it as Markdown,
or lists the headline links found on a front page.

## Installation

```
pip install .
```

## Usage

Turn an article into Markdown:

```
scrape article --source guardian --url https://www.example.com/some-article
```

Supported article sources:

| Source      | Pages it understands               |
|-------------|------------------------------------|
| `guardian`  | Guardian news articles             |
| `microsoft` | Microsoft Learn documentation      |
| `go`        | Go documentation pages             |
| `tofugu`    | Tofugu Japanese-learning articles  |

The only output format is `markdown`, which is the default; it can be given
explicitly with `--format markdown`. The URL may be passed with `-u` as well as
`--url`.

List the headline links on a front page:

```
scrape links --source guardian -u https://www.example.com/
```

Each link is printed as a Markdown link, `[title](url)`, one per line, with
relative links resolved against the page. Only `guardian` is supported for
links.

Source and format names are case-sensitive. An unknown source, an unknown
format or an empty URL is reported as an error before anything is fetched.
Errors are printed to standard error prefixed with `Error:` and the command
exits with status 1.

## Library use

The scrapers can be used directly:

```python
from scrape.factory import create_article_scraper, create_link_scraper

markdown = create_article_scraper("tofugu").scrape_article(url)
links = create_link_scraper("guardian").scrape_links(url)  # {title: url}
```

`create_article_scraper` and `create_link_scraper` raise
`UnsupportedSourceError` (a `ValueError`) for an unknown source. Scraping
raises `scrape.base.ScrapeError` when the page cannot be fetched or the server
answers with an error status. A response that is not HTML produces empty
output rather than an error.

Command options can be checked on their own with
`scrape.cli.ArticleOptions(...).validate()` and
`scrape.cli.LinksOptions(...).validate()`, which raise `OptionsError`.

## Limitations

- No configuration file is read. The `--config` option is accepted but has
  no effect.
- Pages are fetched with a single plain HTTP request; JavaScript is not run,
  so content a site builds in the browser is not seen.

## Development

```
pip install -e ".[test]"
pytest
```