echo("<!DOCTYPE html>\n<html>\n<head>\n")
echo("<title>")
show("title")
echo(" | ", ctx["site_name"], "</title>\n")

section("styles")
echo('<link rel="stylesheet" href="/site.css">\n')
end()

echo("</head>\n<body>\n")
include("partials/nav.py")
show("content")
echo("<footer>Powered by strata</footer>\n")
echo("</body>\n</html>\n")
