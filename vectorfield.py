import math
import string
from enum import Enum
from types import MappingProxyType

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection


###############
## Tokenizer ##
###############

IDENT_START = string.ascii_lowercase
IDENT_CHARS = string.ascii_lowercase + string.digits


class Tokenizer():
    """Handles initial processing of the input string."""

    def __init__(self, line: str):
        self.line = line
        self.index = 0

    def make_tokens(self) -> 'list[Token]':
        """
        Converts a string into a list of tokens by iteratively going over each
        character. A LexError is raised when a character is unrecognized.
        """
        tokens = []

        SINGLE_CHAR_TOKENS = {
            '(': TokenType.LPAREN,
            ')': TokenType.RPAREN,
            '+': TokenType.PLUS,
            '-': TokenType.MINUS,
            '*': TokenType.MUL,
            '/': TokenType.DIV,
            '^': TokenType.EXP,
            ',': TokenType.COMMA,
        }

        while self.curr_char is not None:
            c = self.curr_char  # short variable name

            if c == ' ':
                self._advance()
                continue

            index = self.index
            if c in SINGLE_CHAR_TOKENS:
                tokens.append(Token(SINGLE_CHAR_TOKENS[c], c, self, index))
                self._advance()
                continue
            if c in IDENT_START:
                word = self._make_word()
                tokens.append(Token(TokenType.IDENT, word, self, index))
                continue
            if c in string.digits:
                num = self._make_number()
                tokens.append(Token(TokenType.NUMBER, num, self, index, self.index - index))
                continue

            raise LexError(c, self.line, index)

        return tokens

    def _make_number(self) -> float:
        """
        Advances over a run of digits containing at most one period. A second
        period is left in place for the next token.
        """
        found_period = False
        text = ''

        while self.curr_char is not None:
            if self.curr_char == '.' and not found_period:
                found_period = True
            elif self.curr_char not in string.digits:
                break
            text += self.curr_char
            self._advance()

        return float(text)

    def _make_word(self) -> str:
        """
        Advances and makes an identifier (variable, constant or function name).
        """
        text = ''
        while self.curr_char is not None and self.curr_char in IDENT_CHARS:
            text += self.curr_char
            self._advance()
        return text

    def _advance(self):
        """
        Increments the index by 1 if able.
        """
        self.index += int(self.index < len(self.line))

    @property
    def curr_char(self) -> str | None:
        """
        Retrieves the current character, or None.
        """
        return self.line[self.index] if self.index < len(self.line) else None


class TokenType(Enum):
    NUMBER = 'Number'
    IDENT = 'Identifier'
    LPAREN = '('
    RPAREN = ')'
    PLUS = '+'
    MINUS = '-'
    MUL = '*'
    DIV = '/'
    EXP = '^'
    COMMA = ','


class Token():
    def __init__(self, tok_type: TokenType, tok_val, tokenizer: Tokenizer = None, index: int = 0,
                 length: int = None):
        self.type = tok_type
        self.value = tok_val
        self.tokenizer = tokenizer
        self.index = index
        self._length = length

    @property
    def original_text(self) -> str:
        return self.tokenizer.line if self.tokenizer is not None else ''

    @property
    def length(self) -> int:
        if self._length is not None:
            return self._length
        return len(str(self.value))

    def throw(self, message: str):
        raise ParseError(message, self)

    def __str__(self) -> str:
        return f'Token({self.type}, {self.value})'

    def __repr__(self) -> str:
        return self.__str__()


def lex(text: str) -> 'list[Token]':
    return Tokenizer(text).make_tokens()


###################
## Symbol Tables ##
###################

class BuiltinFunction():
    """
    A registered function: the numeric operation and the exact number of
    arguments every call must supply. Note that this is NOT an AST node.
    """

    def __init__(self, func_name: str, function: callable, arity: int):
        self.func_name = func_name
        self.arity = arity
        self._call = function

    def call(self, *args: float) -> float:
        return self._call(*args)

    def __repr__(self) -> str:
        return f'BuiltinFunction({self.func_name}/{self.arity})'


class SymbolTable():
    """
    Read-only registry of the names an expression may use. The parser resolves
    identifiers against it and the evaluator looks values up in it, so both
    should be handed the same table.
    """

    def __init__(self, variables: 'tuple[str, ...]', constants: 'dict[str, float]',
                 functions: 'dict[str, tuple[callable, int]]'):
        self.variables = tuple(variables)
        self.constants = MappingProxyType(dict(constants))
        self.functions = MappingProxyType({
            name: BuiltinFunction(name, func, arity)
            for name, (func, arity) in functions.items()
        })

    def is_variable(self, name: str) -> bool:
        return name in self.variables

    def is_constant(self, name: str) -> bool:
        return name in self.constants

    def is_function(self, name: str) -> bool:
        return name in self.functions


def _round_half_up(a: float) -> float:
    floor = np.floor(a)
    return floor + 1.0 if a - floor >= 0.5 else floor


_rng = np.random.default_rng()

DEFAULT_SYMBOLS = SymbolTable(
    variables=('x', 'y'),
    constants={
        'pi': math.pi,
        'e': math.e,
    },
    functions={
        'abs': (np.abs, 1),
        'acos': (np.arccos, 1),
        'acosh': (np.arccosh, 1),
        'asin': (np.arcsin, 1),
        'asinh': (np.arcsinh, 1),
        'atan2': (np.arctan2, 2),
        'atan': (np.arctan, 1),
        'atanh': (np.arctanh, 1),
        'ceil': (np.ceil, 1),
        'cos': (np.cos, 1),
        'floor': (np.floor, 1),
        'ln': (np.log, 1),
        'log2': (np.log2, 1),
        'log': (np.log10, 1),
        'max': (np.maximum, 2),
        'min': (np.minimum, 2),
        'random': (_rng.random, 0),
        'round': (_round_half_up, 1),
        'sin': (np.sin, 1),
        'sqrt': (np.sqrt, 1),
        'tan': (np.tan, 1),
    },
)


####################
## Parser and AST ##
####################

class UnaryKind(Enum):
    NEG = '-'
    POS = '+'


class BinaryKind(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'


UNARY_OPS = {
    TokenType.MINUS: UnaryKind.NEG,
    TokenType.PLUS: UnaryKind.POS,
}

BINARY_OPS = {
    TokenType.PLUS: BinaryKind.ADD,
    TokenType.MINUS: BinaryKind.SUB,
    TokenType.MUL: BinaryKind.MUL,
    TokenType.DIV: BinaryKind.DIV,
    TokenType.EXP: BinaryKind.POW,
}

PRECEDENCE = {
    TokenType.EXP: 3,
    TokenType.MUL: 2,
    TokenType.DIV: 2,
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
}

RIGHT_ASSOCIATIVE = (TokenType.EXP,)


def _precedence(token: 'Token | None') -> int:
    """Binding strength of a binary operator; -1 stops folding."""
    if token is None:
        return -1
    return PRECEDENCE.get(token.type, -1)


class Parser():
    def __init__(self, tokens: 'list[Token]', symbols: SymbolTable = DEFAULT_SYMBOLS,
                 original_text: str = None):
        self.tokens = tokens
        self.symbols = symbols
        if original_text is None:
            original_text = tokens[0].original_text if tokens else ''
        self.original_text = original_text
        self.index = 0

    def parse(self) -> 'AST':
        expr = self._expr()
        if self.curr_tok is not None:
            self.curr_tok.throw(f'Expected end of expression, got "{self.curr_tok.value}"')
        return expr

    def _expr(self) -> 'AST':
        """expr = unary { binop unary }, folded by precedence climbing"""
        lhs = self._unary()
        return self._binary(0, lhs)

    def _unary(self) -> 'AST':
        """unary = ("+" | "-") unary | primary"""
        if self.curr_tok is not None and self.curr_tok.type in UNARY_OPS:
            sign_token = self.curr_tok
            self._advance()
            operand = self._unary()
            return UnaryOp(UNARY_OPS[sign_token.type], operand, sign_token)
        return self._primary()

    def _binary(self, min_prec: int, lhs: 'AST') -> 'AST':
        """
        Folds binary operators of precedence >= `min_prec` into `lhs`. Before
        each fold, any tighter-binding operator that follows (or another "^",
        which groups to the right) is absorbed into the right-hand side.
        """
        while True:
            op = self.curr_tok
            prec = _precedence(op)
            if prec < min_prec:
                break

            self._advance()
            rhs = self._unary()

            while True:
                next_prec = _precedence(self.curr_tok)
                if prec < next_prec or (next_prec == prec and self.curr_tok.type in RIGHT_ASSOCIATIVE):
                    rhs = self._binary(next_prec, rhs)
                else:
                    break

            lhs = BinaryOp(BINARY_OPS[op.type], lhs, rhs, op)

        return lhs

    def _primary(self) -> 'AST':
        """primary = NUMBER | variable | constant | func_call | "(" expr ")" """
        token = self.curr_tok
        if token is None:
            raise ParseError('Unexpected end of expression', None, self.original_text, self._end_index())

        self._advance()
        match token.type:
            case TokenType.NUMBER:
                return Num(token.value, token)
            case TokenType.LPAREN:
                expr = self._expr()
                self._demand(TokenType.RPAREN, 'Expected closing parenthesis')
                return expr
            case TokenType.IDENT:
                return self._identifier(token)

        token.throw(f'Unexpected token "{token.value}"')

    def _identifier(self, token: Token) -> 'AST':
        """Resolves a name against the variables, constants, then functions."""
        name = token.value
        if self.symbols.is_variable(name):
            return Var(name, token)
        if self.symbols.is_constant(name):
            return Const(name, token)
        if not self.symbols.is_function(name):
            token.throw(f'Unrecognized identifier "{name}"')

        func = self.symbols.functions[name]
        self._demand(TokenType.LPAREN, 'Expected opening parenthesis')
        args = self._params(func.arity)
        self._demand(TokenType.RPAREN, 'Expected closing parenthesis')
        return Call(name, args, token)

    def _params(self, count: int) -> 'tuple[AST, ...]':
        """params = expr { "," expr }, exactly `count` of them"""
        params = []
        for i in range(count):
            if i > 0:
                self._demand(TokenType.COMMA, 'Expected comma')
            params.append(self._expr())
        return tuple(params)

    def _demand(self, tok_type: TokenType, message: str):
        """Demand and consume a token of the required type, or throw an error."""

        if self.curr_tok is None:
            raise ParseError(message, None, self.original_text, self._end_index())

        if self.curr_tok.type is not tok_type:
            self.curr_tok.throw(f'{message}, got "{self.curr_tok.value}"')

        self._advance()

    def _end_index(self) -> int:
        if not self.tokens:
            return len(self.original_text)
        return self.tokens[-1].index + self.tokens[-1].length

    def _advance(self):
        self.index += int(self.index < len(self.tokens))

    @property
    def curr_tok(self) -> Token | None:
        return self.tokens[self.index] if self.index < len(self.tokens) else None


def parse(tokens: 'list[Token]', symbols: SymbolTable = DEFAULT_SYMBOLS) -> 'AST':
    return Parser(tokens, symbols).parse()


def parse_expression(text: str, symbols: SymbolTable = DEFAULT_SYMBOLS) -> 'AST':
    """Lexes and parses `text` into an AST, raising LexError or ParseError."""
    return Parser(lex(text), symbols, text).parse()


class AST():
    """Abstract base class for all nodes in the Abstract Syntax Tree."""

    def __str__(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return self.__str__()


class Num(AST):
    """AST node representing a numeric literal."""

    def __init__(self, value: float, token: Token = None):
        self.value = value
        self.token = token

    def __str__(self) -> str:
        return f'Num({self.value})'


class Var(AST):
    """AST node representing a reference to one of the variables."""

    def __init__(self, name: str, token: Token = None):
        self.name = name
        self.token = token

    def __str__(self) -> str:
        return f'Var({self.name})'


class Const(AST):
    """AST node representing a named constant such as pi."""

    def __init__(self, name: str, token: Token = None):
        self.name = name
        self.token = token

    def __str__(self) -> str:
        return f'Const({self.name})'


class UnaryOp(AST):
    """AST node representing a unary operation (+ or - before an expression)."""

    def __init__(self, kind: UnaryKind, operand: AST, token: Token = None):
        self.kind = kind
        self.operand = operand
        self.token = token

    def __str__(self) -> str:
        return f'UnaryOp({self.kind.value}{self.operand})'


class BinaryOp(AST):
    """AST node representing a binary operation (+, -, *, /, ^)."""

    def __init__(self, kind: BinaryKind, left: AST, right: AST, token: Token = None):
        self.kind = kind
        self.left = left
        self.right = right
        self.token = token

    def __str__(self) -> str:
        return f'BinaryOp({self.left} {self.kind.value} {self.right})'


class Call(AST):
    """AST node representing a call to a registered function."""

    def __init__(self, func_name: str, args: 'tuple[AST, ...]', token: Token = None):
        self.func_name = func_name
        self.args = tuple(args)
        self.token = token

    def __str__(self) -> str:
        return f'Call({self.func_name}, [{", ".join(str(arg) for arg in self.args)}])'


###############
## Evaluator ##
###############

class Evaluator():
    """Walks an AST and computes its value for one set of variable bindings."""

    def __init__(self, symbols: SymbolTable = DEFAULT_SYMBOLS):
        self.symbols = symbols

    def evaluate(self, root: AST, env: 'dict[str, float]') -> float:
        # division by zero, overflow and domain errors give inf/nan, not warnings
        with np.errstate(all='ignore'):
            return float(self._eval(root, env))

    def _eval(self, node: AST, env: 'dict[str, float]'):
        match node:
            case Num():
                return node.value
            case Var():
                if node.name not in env:
                    raise EvalError(f'Undefined variable "{node.name}"', node.token)
                return float(env[node.name])
            case Const():
                if not self.symbols.is_constant(node.name):
                    raise EvalError(f'Undefined constant "{node.name}"', node.token)
                return self.symbols.constants[node.name]
            case UnaryOp():
                operand = self._eval(node.operand, env)
                match node.kind:
                    case UnaryKind.NEG:
                        return np.negative(operand)
                    case UnaryKind.POS:
                        return operand
            case BinaryOp():
                left = self._eval(node.left, env)
                right = self._eval(node.right, env)
                match node.kind:
                    case BinaryKind.ADD:
                        return np.add(left, right)
                    case BinaryKind.SUB:
                        return np.subtract(left, right)
                    case BinaryKind.MUL:
                        return np.multiply(left, right)
                    case BinaryKind.DIV:
                        return np.divide(left, right, dtype=float)
                    case BinaryKind.POW:
                        return np.power(left, right, dtype=float)
            case Call():
                return self._call(node, env)
        raise EvalError(f'Invalid expression {node}', getattr(node, 'token', None))

    def _call(self, node: Call, env: 'dict[str, float]'):
        func = self.symbols.functions.get(node.func_name)
        if func is None:
            raise EvalError(f'Undefined function "{node.func_name}"', node.token)
        if len(node.args) != func.arity:
            raise EvalError(
                f'"{node.func_name}" takes {func.arity} argument(s), got {len(node.args)}',
                node.token)
        return func.call(*[self._eval(arg, env) for arg in node.args])


def evaluate(root: AST, env: 'dict[str, float]', symbols: SymbolTable = DEFAULT_SYMBOLS) -> float:
    return Evaluator(symbols).evaluate(root, env)


################
## Exceptions ##
################

class LocationalException(Exception):
    def __init__(self, message: str, text: str, index: int, length: int = 1):
        self.message = message
        self.text = text
        self.index = index
        self.length = length

        msg = f'''
ERROR: {self.text}
       {self._get_error_highlight()}
{self.message}'''
        super().__init__(msg)

    def _get_error_highlight(self) -> str:
        return ' ' * self.index + '^' * self.length


class LexError(LocationalException):
    """A character outside the accepted input alphabet."""

    def __init__(self, char: str, text: str, index: int):
        self.char = char
        super().__init__(f"Unrecognized character '{char}'", text, index)


class ParseError(LocationalException):
    """
    A structural violation of the grammar. `token` is the offending token, or
    None when the input ended early.
    """

    def __init__(self, message: str, token: Token = None, text: str = '', index: int = 0):
        self.token = token
        if token is not None:
            super().__init__(message, token.original_text, token.index, token.length)
        else:
            super().__init__(message, text, index)


class EvalError(LocationalException):
    def __init__(self, message: str, token: Token = None):
        self.token = token
        if token is not None:
            super().__init__(message, token.original_text, token.index, token.length)
        else:
            super().__init__(message, '', 0, 0)


##############
## Renderer ##
##############

CANVAS_SIZE = 600
VEC_DIAMETER = 20


def show_exception(func: callable):
    """
    Runs `func` and returns its result. Lexing, parsing and evaluation errors
    are printed for the user, then re-raised so the render pass aborts.
    """
    try:
        return func()
    except LocationalException as e:
        print(e)
        raise


def check_domain(x0: float, x1: float, y0: float, y1: float):
    """Raises ValueError unless [x0, x1] x [y0, y1] is finite and non-empty."""
    if not all(math.isfinite(b) for b in (x0, x1, y0, y1)) or x0 == x1 or y0 == y1:
        raise ValueError(f'Invalid domain [{x0}, {x1}] x [{y0}, {y1}]')


class FieldConfig():
    """The two component expressions and the domain [x0, x1] x [y0, y1]."""

    def __init__(self, xfunc: AST, yfunc: AST, x0: float, x1: float, y0: float, y1: float):
        self.xfunc = xfunc
        self.yfunc = yfunc
        self.x0 = x0
        self.x1 = x1
        self.y0 = y0
        self.y1 = y1


class VectorField():
    """
    Grid coordinates `xs` (columns) and `ys` (rows) plus the unit direction
    (`us`, `vs`) at every grid point, indexed [row, col].
    """

    def __init__(self, xs: np.ndarray, ys: np.ndarray, us: np.ndarray, vs: np.ndarray):
        self.xs = xs
        self.ys = ys
        self.us = us
        self.vs = vs


class VectorFieldRenderer():
    def __init__(self, evaluator: Evaluator = None, canvas_size: int = CANVAS_SIZE,
                 vec_diameter: int = VEC_DIAMETER):
        self.evaluator = evaluator if evaluator is not None else Evaluator()
        self.canvas_size = canvas_size
        self.vec_diameter = vec_diameter

    @property
    def steps(self) -> int:
        return self.canvas_size // self.vec_diameter

    def compute(self, config: FieldConfig) -> VectorField:
        """
        Evaluates both expressions at every grid point, row by row, and
        normalizes each result into a direction. Zero vectors stay (0, 0).
        """
        xs = np.linspace(config.x0, config.x1, self.steps + 1)
        ys = np.linspace(config.y0, config.y1, self.steps + 1)
        us = np.zeros((len(ys), len(xs)))
        vs = np.zeros((len(ys), len(xs)))

        for row, y in enumerate(ys):
            for col, x in enumerate(xs):
                env = {'x': float(x), 'y': float(y)}
                u = show_exception(lambda: self.evaluator.evaluate(config.xfunc, env))
                v = show_exception(lambda: self.evaluator.evaluate(config.yfunc, env))
                mag = math.hypot(u, v)
                if mag != 0:
                    us[row, col] = u / mag
                    vs[row, col] = v / mag

        return VectorField(xs, ys, us, vs)

    def render(self, config: FieldConfig, ax: Axes = None) -> Axes:
        """
        Draws the field onto `ax` (a new figure if omitted). Every grid point
        is evaluated, and the domain checked, before the axes are touched, so
        a failing expression or an unusable domain leaves the previous plot in
        place.
        """
        check_domain(config.x0, config.x1, config.y0, config.y1)
        field = self.compute(config)

        if ax is None:
            _, ax = plt.subplots(figsize=(6, 6))
        ax.clear()

        ax.axvline((config.x0 + config.x1) / 2, color='#cccccc', linewidth=1)
        ax.axhline((config.y0 + config.y1) / 2, color='#cccccc', linewidth=1)

        # arrow length is given in canvas pixels, convert it to data units
        rad = self.vec_diameter / 2 + 2
        dx = field.us * rad * (config.x1 - config.x0) / self.canvas_size
        dy = field.vs * rad * (config.y1 - config.y0) / self.canvas_size

        px, py = np.meshgrid(field.xs, field.ys)
        tips_x = px + dx
        tips_y = py + dy
        segments = np.stack([
            np.column_stack([px.ravel(), py.ravel()]),
            np.column_stack([tips_x.ravel(), tips_y.ravel()]),
        ], axis=1)

        ax.add_collection(LineCollection(segments, colors='#999999', linewidths=1))
        ax.scatter(tips_x.ravel(), tips_y.ravel(), s=2, color='#000000')
        ax.set_xlim(config.x0, config.x1)
        ax.set_ylim(config.y0, config.y1)
        ax.set_xlabel('x')
        ax.set_ylabel('y')
        return ax


#################
## Application ##
#################

class VectorFieldApp():
    DEFAULT_XFUNC = 'cos(y + (pi / 2))^2'
    DEFAULT_YFUNC = 'sin(x)^2'
    DEFAULT_BOUNDS = (-5.0, 5.0, -5.0, 5.0)

    def __init__(self, symbols: SymbolTable = DEFAULT_SYMBOLS):
        self.symbols = symbols
        self.evaluator = Evaluator(symbols)
        self.renderer = VectorFieldRenderer(self.evaluator)
        self.ax = None

        self.xfunc = self.DEFAULT_XFUNC
        self.yfunc = self.DEFAULT_YFUNC
        self.bounds = self.DEFAULT_BOUNDS
        self.point = (0.0, 0.0)

        self.commands = {
            'EXIT': self._exit,
            'PLOT': self._plot,
            'XFUNC': self._xfunc,
            'YFUNC': self._yfunc,
            'BOUNDS': self._bounds,
            'POINT': self._point,
            'SYMBOLS': self._symbols,
        }

    def _exit(self, args: str):
        """Syntax: EXIT"""
        raise SystemExit()

    def _xfunc(self, args: str):
        """Syntax: XFUNC <expression>"""
        show_exception(lambda: parse_expression(args, self.symbols))
        self.xfunc = args

    def _yfunc(self, args: str):
        """Syntax: YFUNC <expression>"""
        show_exception(lambda: parse_expression(args, self.symbols))
        self.yfunc = args

    def _bounds(self, args: str):
        """Syntax: BOUNDS <x0>, <x1>, <y0>, <y1>"""
        try:
            x0, x1, y0, y1 = [float(part.strip()) for part in args.split(',')]
            check_domain(x0, x1, y0, y1)
        except ValueError:
            raise Exception('Syntax error. Correct usage:'
                '\n  BOUNDS <x0>, <x1>, <y0>, <y1>')
        self.bounds = (x0, x1, y0, y1)

    def _point(self, args: str):
        """Syntax: POINT <x>, <y>

        Sets the values of x and y used when evaluating a plain expression.
        """
        try:
            x, y = [float(part.strip()) for part in args.split(',')]
        except ValueError:
            raise Exception('Syntax error. Correct usage:'
                '\n  POINT <x>, <y>')
        self.point = (x, y)

    def _symbols(self, args: str):
        """Syntax: SYMBOLS"""
        print('Variables: ' + ', '.join(self.symbols.variables))
        print('Constants: ' + ', '.join(self.symbols.constants))
        print('Functions: ' + ', '.join(self.symbols.functions))

    def _plot(self, args: str):
        """Syntax: PLOT

        Re-parses both expressions and draws the field over the current bounds
        using matplotlib without blocking the main thread.
        """
        x0, x1, y0, y1 = self.bounds
        config = FieldConfig(
            xfunc=show_exception(lambda: parse_expression(self.xfunc, self.symbols)),
            yfunc=show_exception(lambda: parse_expression(self.yfunc, self.symbols)),
            x0=x0, x1=x1, y0=y0, y1=y1,
        )

        if self.ax is None or not plt.fignum_exists(self.ax.figure.number):
            _, self.ax = plt.subplots(figsize=(6, 6))
        self.renderer.render(config, self.ax)
        self.ax.set_title(f'({self.xfunc}, {self.yfunc})')
        plt.show(block=False)

    def evaluate_line(self, line: str) -> float:
        """Evaluates an expression at the current point."""
        x, y = self.point
        root = show_exception(lambda: parse_expression(line, self.symbols))
        return show_exception(lambda: self.evaluator.evaluate(root, {'x': x, 'y': y}))

    def handle(self, line: str):
        """
        Runs one line of input. Commands are identified by the first word of
        the line; anything else is an expression.
        """
        for cmd, handler in self.commands.items():
            if line.startswith(cmd):
                handler(line[len(cmd):].strip())
                return
        result = self.evaluate_line(line)
        print(int(result) if result.is_integer() else result)

    def run(self):
        """The read-eval-plot loop."""
        self._symbols('')
        try:
            while True:
                try:
                    line = input('\n>>> ').strip()
                    if not line:
                        continue
                    self.handle(line)
                except (SystemExit, EOFError):
                    break
                except LocationalException:
                    # already printed by show_exception
                    continue
                except Exception as e:
                    print(e)
        except KeyboardInterrupt:
            pass


################
## Entrypoint ##
################

def main():
    VectorFieldApp().run()


if __name__ == '__main__':
    main()
