echo("<nav>")
for item in ctx["nav_items"]:
    echo('<a href="', item["url"], '">', item["label"], "</a>")
echo("</nav>\n")
