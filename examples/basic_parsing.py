"""
Basic parsing example.

Demonstrates lazy Urls, domain decomposition, set/join and rendering.
Uses the Public Suffix List bundled with publicsuffixlist.
"""

from urlparts import Url, extract_urls
from urlparts.psl import get_rule_set


def main():
    """Run basic parsing example."""
    print("=" * 60)
    print("urlparts: Basic Parsing Example")
    print("=" * 60)

    print(f"\nPublic Suffix List: {len(get_rule_set())} rules")

    # Example 1: Decompose a single URL
    print("\n1. Single URL")
    print("-" * 60)

    raw_url = "https://sub.domain.jwage.com:443/about?param=value#fragment?param=value"
    url = Url(raw_url)
    print(f"Raw URL: {raw_url}")
    print(f"Materialized before access: {url.materialized}")

    for name, value in url.to_dict().items():
        print(f"  {name}: {value}")

    # Example 2: Registrable domains across suffix kinds
    print("\n\n2. Registrable Domains")
    print("-" * 60)

    for raw in [
        "http://www.example.co.uk",
        "http://a.b.example.uk.com",
        "http://www.city.kawasaki.jp",
        "http://www.食狮.中国",
        "http://localhost",
    ]:
        url = Url(raw)
        print(
            f"  {url.host:<24} suffix={url.public_suffix!s:<12} "
            f"domain={url.registrable_domain!s:<20} sub={url.subdomain}"
        )

    # Example 3: Edit and merge
    print("\n\n3. set() and join()")
    print("-" * 60)

    url = Url("http://example.com/a/b?x=1")
    url.set("path", url.get_path().add("c"))
    url.set("query", url.get_query().set("y", 2))
    print(f"After set():  {url}")

    url.join("https://shop.example.co.uk")
    print(f"After join(): {url}")
    print(f"  registrable_domain: {url.registrable_domain}")

    url.set("host", "blog.example.org").refresh()
    print(f"After set('host') + refresh(): {url.registrable_domain}")

    # Example 4: URLs in free text
    print("\n\n4. Extraction")
    print("-" * 60)

    text = "Docs live at https://docs.example.com/guide, code at http://example.org/repo."
    for found in extract_urls(text):
        print(f"  {found.raw} -> {found.registrable_domain}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
