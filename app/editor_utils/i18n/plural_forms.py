"""Plural-form selection.

Turns a language's configuration into a function mapping a quantity to the
index of the plural variant to use. Languages may register an explicit
selector, or ship a gettext PO-style header under the reserved
``PLURAL_FORMS`` message key::

    nplurals=3; plural=n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2;

The ``plural`` expression is parsed by a small recursive-descent parser
into a tree that is evaluated directly; nothing is ever passed to ``eval``.
"""

import math
import operator
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union

from editor_utils.errors import PluralFormsError
from editor_utils.i18n.models import LanguageRecord, PluralFormSelector
from editor_utils.logging import get_module_logger

logger = get_module_logger()

PLURAL_FORMS_KEY = "PLURAL_FORMS"

_EXPRESSION_PATTERN = re.compile(r"[-+*/!=<>%&|?:.\s\dn()]+")

_HEADER_PATTERN = re.compile(
    r"^\s*nplurals\s*=\s*(?P<nplurals>\d+)\s*;"
    r"\s*plural\s*=\s*(?P<expression>[-+*/!=<>%&|?:.\s\dn()]+?)\s*;?\s*$"
)

_TOKEN_PATTERN = re.compile(
    r"\s*(?:"
    r"(?P<number>\d+(?:\.\d*)?|\.\d+)"
    r"|(?P<variable>n)"
    r"|(?P<operator>==|!=|<=|>=|&&|\|\||[-+*/%!<>?:()])"
    r")"
)

Number = Union[int, float, bool]


def default_plural_form(n: float) -> int:
    """English plural rule: index 0 for exactly one, index 1 otherwise."""
    return 0 if n == 1 else 1


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str
    position: int


def _tokenize(expression: str) -> List[_Token]:
    tokens: List[_Token] = []
    position = 0
    end = len(expression.rstrip())

    while position < end:
        match = _TOKEN_PATTERN.match(expression, position)
        if match is None:
            raise PluralFormsError(
                "plural-forms-unexpected-character: The plural expression contains an unexpected character.",
                {"expression": expression, "position": position},
            )
        kind = match.lastgroup or "operator"
        tokens.append(_Token(kind, match.group(kind), match.start(kind)))
        position = match.end()

    return tokens


def _divide(left: Number, right: Number) -> Number:
    if right == 0:
        raise PluralFormsError(
            "plural-forms-division-by-zero: The plural expression divides by zero.",
            {"left": left, "right": right},
        )
    return left / right


def _remainder(left: Number, right: Number) -> Number:
    if right == 0:
        raise PluralFormsError(
            "plural-forms-division-by-zero: The plural expression divides by zero.",
            {"left": left, "right": right},
        )
    if isinstance(left, int) and isinstance(right, int):
        # Remainder takes the sign of the dividend.
        result = abs(left) % abs(right)
        return -result if left < 0 else result
    return math.fmod(left, right)


_BINARY_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _remainder,
}

_UNARY_OPERATORS: dict[str, Callable[[Any], Any]] = {
    "!": operator.not_,
    "-": operator.neg,
    "+": operator.pos,
}


class _Node:
    def evaluate(self, n: float) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class _Literal(_Node):
    value: Number

    def evaluate(self, n: float) -> Any:
        return self.value


@dataclass(frozen=True)
class _Variable(_Node):
    def evaluate(self, n: float) -> Any:
        return n


@dataclass(frozen=True)
class _Unary(_Node):
    op: str
    operand: _Node

    def evaluate(self, n: float) -> Any:
        return _UNARY_OPERATORS[self.op](self.operand.evaluate(n))


@dataclass(frozen=True)
class _Binary(_Node):
    op: str
    left: _Node
    right: _Node

    def evaluate(self, n: float) -> Any:
        left = self.left.evaluate(n)
        if self.op == "&&":
            return self.right.evaluate(n) if left else left
        if self.op == "||":
            return left if left else self.right.evaluate(n)
        return _BINARY_OPERATORS[self.op](left, self.right.evaluate(n))


@dataclass(frozen=True)
class _Conditional(_Node):
    test: _Node
    consequent: _Node
    alternate: _Node

    def evaluate(self, n: float) -> Any:
        if self.test.evaluate(n):
            return self.consequent.evaluate(n)
        return self.alternate.evaluate(n)


class _Parser:
    """Recursive-descent parser for C-style plural expressions.

    Precedence, loosest first: ``?:``, ``||``, ``&&``, ``== !=``,
    ``< <= > >=``, ``+ -``, ``* / %``, unary ``! - +``.

    Expressions longer than MAX_TOKENS tokens or nested deeper than
    MAX_NESTING levels are rejected with PluralFormsError.
    """

    MAX_NESTING = 32
    MAX_TOKENS = 256

    _LEVELS = (
        ("||",),
        ("&&",),
        ("==", "!="),
        ("<", "<=", ">", ">="),
        ("+", "-"),
        ("*", "/", "%"),
    )

    def __init__(self, expression: str):
        self.expression = expression
        self.tokens = _tokenize(expression)
        self.index = 0
        self.nesting = 0

        if len(self.tokens) > self.MAX_TOKENS:
            raise PluralFormsError(
                "plural-forms-too-long: The plural expression has too many tokens.",
                {"expression": expression, "tokens": len(self.tokens)},
            )

    def parse(self) -> _Node:
        if not self.tokens:
            self._fail("plural-forms-empty-expression: The plural expression is empty.")
        node = self._conditional()
        if self.index < len(self.tokens):
            self._fail(
                "plural-forms-unexpected-token: Unexpected token in the plural expression."
            )
        return node

    def _peek(self) -> Optional[_Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _accept(self, *operators: str) -> Optional[_Token]:
        token = self._peek()
        if token is not None and token.kind == "operator" and token.text in operators:
            self.index += 1
            return token
        return None

    def _expect(self, text: str) -> None:
        if self._accept(text) is None:
            self._fail(
                f"plural-forms-expected-token: Expected '{text}' in the plural expression."
            )

    def _fail(self, message: str) -> None:
        token = self._peek()
        raise PluralFormsError(
            message,
            {
                "expression": self.expression,
                "position": token.position if token else len(self.expression),
            },
        )

    def _enter(self) -> None:
        self.nesting += 1
        if self.nesting > self.MAX_NESTING:
            self._fail(
                "plural-forms-too-deep: The plural expression is nested too deeply."
            )

    def _leave(self) -> None:
        self.nesting -= 1

    def _conditional(self) -> _Node:
        self._enter()
        test = self._binary(0)
        if self._accept("?") is None:
            self._leave()
            return test
        consequent = self._conditional()
        self._expect(":")
        alternate = self._conditional()
        self._leave()
        return _Conditional(test, consequent, alternate)

    def _binary(self, level: int) -> _Node:
        if level == len(self._LEVELS):
            return self._unary()

        node = self._binary(level + 1)
        while True:
            token = self._accept(*self._LEVELS[level])
            if token is None:
                return node
            node = _Binary(token.text, node, self._binary(level + 1))

    def _unary(self) -> _Node:
        token = self._accept(*_UNARY_OPERATORS)
        if token is None:
            return self._primary()

        self._enter()
        operand = self._unary()
        self._leave()
        return _Unary(token.text, operand)

    def _primary(self) -> _Node:
        token = self._peek()
        if token is None:
            self._fail(
                "plural-forms-unexpected-end: The plural expression ends unexpectedly."
            )

        if token.kind == "number":
            self.index += 1
            text = token.text
            return _Literal(float(text) if "." in text else int(text))

        if token.kind == "variable":
            self.index += 1
            return _Variable()

        if self._accept("(") is not None:
            node = self._conditional()
            self._expect(")")
            return node

        self._fail("plural-forms-unexpected-token: Unexpected token in the plural expression.")


class PluralRule:
    """A compiled plural-form expression.

    Attributes:
        nplurals: Number of plural variants declared by the header.
        expression: Source of the ``plural`` expression.

    Example:
        >>> rule = PluralRule(3, "n==1 ? 0 : n<=4 ? 1 : 2")
        >>> rule(1), rule(3), rule(7)
        (0, 1, 2)
    """

    def __init__(self, nplurals: int, expression: str):
        if not _EXPRESSION_PATTERN.fullmatch(expression):
            raise PluralFormsError(
                "plural-forms-invalid-expression: The plural expression contains forbidden characters.",
                {"expression": expression},
            )
        self.nplurals = nplurals
        self.expression = expression
        self._root = _Parser(expression).parse()

    def __call__(self, n: float) -> int:
        """Evaluate the expression for ``n``.

        Args:
            n: Quantity.

        Returns:
            Plural category index. Booleans are coerced to 0/1 and other
            numbers are truncated to int.

        Raises:
            PluralFormsError: If evaluation divides by zero or does not yield
                a finite number.
        """
        value = self._root.evaluate(n)
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, float) and not math.isfinite(value):
            raise PluralFormsError(
                "plural-forms-invalid-result: The plural expression did not return a finite number.",
                {"expression": self.expression, "n": n},
            )
        return int(value)

    def __repr__(self) -> str:
        return f"PluralRule(nplurals={self.nplurals}, expression={self.expression!r})"


def parse_plural_forms(header: str) -> PluralRule:
    """Parse a PO ``Plural-Forms`` header value.

    Args:
        header: Value such as ``"nplurals=2; plural=n != 1;"``.

    Returns:
        Compiled PluralRule.

    Raises:
        PluralFormsError: If the header does not follow the
            ``nplurals=<N>; plural=<expr>;`` grammar or the expression is
            invalid.
    """
    match = _HEADER_PATTERN.match(header) if isinstance(header, str) else None
    if match is None:
        raise PluralFormsError(
            "plural-forms-invalid-header: The plural forms header does not match 'nplurals=<N>; plural=<expression>;'.",
            {"header": header},
        )
    return PluralRule(int(match.group("nplurals")), match.group("expression"))


def resolve_plural_form(
    record: Optional[LanguageRecord],
    plural_forms_key: str = PLURAL_FORMS_KEY,
) -> PluralFormSelector:
    """Derive the plural-form selector of a language.

    Resolution order:
    1. Selector registered explicitly for the language
    2. PO-style header stored under ``plural_forms_key``
    3. English default rule

    A malformed header is logged and ignored.

    Args:
        record: The language's record, or None for an unknown language.
        plural_forms_key: Reserved message key holding the header.

    Returns:
        Function mapping a quantity to a plural category index.
    """
    if record is None:
        return default_plural_form

    if record.plural_form is not None:
        return record.plural_form

    header = record.messages.get(plural_forms_key)
    if header is None:
        return default_plural_form

    try:
        rule = parse_plural_forms(header)
    except PluralFormsError as e:
        logger.warning(
            "invalid_plural_forms_header",
            language=record.language,
            header=header,
            error=str(e),
        )
        return default_plural_form

    logger.debug(
        "compiled_plural_forms",
        language=record.language,
        nplurals=rule.nplurals,
        expression=rule.expression,
    )
    return rule
