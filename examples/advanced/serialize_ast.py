"""Cache parsed AST to disk — JSON round-trip."""

from tagdown import parse
from tagdown.serialization import from_json, to_json

doc = parse('code-block(highlights: [1, 3..], lang: "ts") { "let x = 1;" }')

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
