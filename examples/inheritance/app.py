"""Template inheritance -- a child page filling its layout's sections.

Loads templates from disk, demonstrates extend/section/show, the
``@parent`` marker and included partials.

Run:
    python app.py
"""

from pathlib import Path

from strata import Renderer

templates_dir = Path(__file__).parent / "templates"
renderer = Renderer(templates_dir)

nav_items = [
    {"url": "/", "label": "Home"},
    {"url": "/about", "label": "About"},
]

home_output = renderer.render(
    "home.py",
    site_name="My Site",
    nav_items=nav_items,
    title="Welcome",
    message="This is a strata-powered site with template inheritance.",
)

about_output = renderer.render(
    "about.py",
    site_name="My Site",
    nav_items=nav_items,
    title="About Us",
    description="Pages are plain Python files that extend a shared layout.",
)


def main() -> None:
    print("=== Home Page ===")
    print(home_output)
    print()
    print("=== About Page ===")
    print(about_output)


if __name__ == "__main__":
    main()
