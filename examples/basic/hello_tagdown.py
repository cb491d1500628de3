"""Parse and render tagdown in 3 lines — zero config, zero deps."""

from tagdown import parse, render

doc = parse('div { h1 { "Hello" } p { "World" } }')
html = render(doc)
print(html)
