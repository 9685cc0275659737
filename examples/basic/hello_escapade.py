"""Escape one string for every grammar with zero config."""

from escapade import Grammar, escape

text = 'Tom & "Jerry", <it\'s> caf\u00e9\n'

for grammar in Grammar:
    print(f"{grammar.value:12} {escape(text, grammar)}")
