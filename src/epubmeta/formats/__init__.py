# ABOUTME: EPUB container format handling: archive access, rootfile lookup, OPF parsing.
# ABOUTME: Each stage lives in its own module and raises errors from formats.errors.
