extend("layout.py")

section("title")
echo(ctx["title"])
end()

# Keep the site stylesheet and add one of our own.
section("styles")
echo("@parent")
echo('<link rel="stylesheet" href="/about.css">\n')
end()

section("content")
echo("<h1>", ctx["title"], "</h1>\n")
echo("<p>", ctx["description"], "</p>\n")
end()
