from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("entity_columns", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
)

standalone_page_template = env.get_template("standalone_page.html")
