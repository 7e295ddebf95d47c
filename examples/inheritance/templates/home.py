extend("layout.py")

section("title")
echo(ctx["title"])
end()

section("content")
echo("<h1>", ctx["title"], "</h1>\n")
echo("<p>", ctx["message"], "</p>\n")
end()
