"""Load escaping defaults from a settings dict and stream to a file."""

import sys

from escapade import EscapeConfig, escape_config_context, escape_to

settings = {
    "html": ["use-decimal", "use-iso-latin-1-entities"],
    "yaml": ["escape-non-ascii"],
}

with escape_config_context(EscapeConfig.from_dict(settings)):
    escape_to("\u00a3 costs 'nothing'\n", sys.stdout, "html")
    escape_to("caf\u00e9", sys.stdout, "yaml")
    sys.stdout.write("\n")
