"""Lexer for FlexiQL pipelines: words separated into stages by ``>>``."""

from __future__ import annotations

from dataclasses import dataclass, field

import ply.lex as lex

from flexiql.errors import QuerySyntaxError

STAGE_DELIMITER = ">>"


@dataclass
class Stage:
    """One delimiter-separated segment of a pipeline."""

    text: str  # Trimmed stage text, as written
    words: list[str] = field(default_factory=list)

    @property
    def keyword(self) -> str:
        """The lowercased first word, or "" for an empty stage."""
        return self.words[0].lower() if self.words else ""


class PipelineLexer:
    """Lexer for tokenizing FlexiQL pipelines."""

    tokens = ["PIPE", "WORD"]

    def __init__(self) -> None:
        self.lexer: lex.Lexer = None  # type: ignore

    # Function rules are tried in definition order, so PIPE wins over WORD
    def t_PIPE(self, t: lex.LexToken) -> lex.LexToken:
        r">>"
        return t

    def t_WORD(self, t: lex.LexToken) -> lex.LexToken:
        r"(?:(?!>>)\S)+"
        return t

    def t_WHITESPACE(self, t: lex.LexToken) -> None:
        r"\s+"
        t.lexer.lineno += t.value.count("\n")

    def t_error(self, t: lex.LexToken) -> None:
        raise QuerySyntaxError(f"Illegal character '{t.value[0]}' at position {t.lexpos}")

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens

    def split_stages(self, data: str) -> list[Stage]:
        """Split a pipeline into its stages.

        Every delimiter closes a stage, so ``a >> >> b`` yields three stages
        with an empty one in the middle. Stage text is sliced from the input
        rather than rebuilt from words, which keeps the original spacing
        inside a stage (``show`` needs it to split on commas).
        """
        stages: list[Stage] = []
        start = 0
        words: list[str] = []
        for tok in self.tokenize(data):
            if tok.type == "PIPE":
                stages.append(Stage(text=data[start:tok.lexpos].strip(), words=words))
                start = tok.lexpos + len(STAGE_DELIMITER)
                words = []
            else:
                words.append(tok.value)
        stages.append(Stage(text=data[start:].strip(), words=words))
        return stages
