"""Command line, interactive prompt and command completion."""