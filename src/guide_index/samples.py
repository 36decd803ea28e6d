from __future__ import annotations

from pathlib import Path

C_GUIDE_TEXT = """# C Syntax Guide

A compact revision sheet for the C language. Tables list the symbols worth
memorising; code samples show them in context.

## Program Structure
Every hosted C program starts executing at `main`. Headers are pulled in by
the preprocessor before compilation.

```c
#include <stdio.h>

int main(void) {
    printf("Hello, world\\n");
    return 0;
}
```

## Data Types

### Basic Types
| Type | Typical Size | Description |
|------|--------------|-------------|
| `char` | 1 byte | Single character or small integer |
| `int` | 4 bytes | Signed integer |
| `float` | 4 bytes | Single-precision floating point |
| `double` | 8 bytes | Double-precision floating point |
| `void` | - | Absence of a value |

### Type Qualifiers
| Keyword | Meaning |
|---------|---------|
| `const` | Object may not be modified after initialisation |
| `volatile` | Object may change outside the program's control |
| `unsigned` | Integer type without a sign bit |

## Operators

### Arithmetic Operators
| Operator | Description | Example |
|----------|-------------|---------|
| `+` | Addition | `a + b` |
| `-` | Subtraction | `a - b` |
| `*` | Multiplication | `a * b` |
| `/` | Division | `a / b` |
| `%` | Remainder | `a % b` |

### Relational Operators
| Operator | Description | Example |
|----------|-------------|---------|
| `==` | Equal to | `a == b` |
| `!=` | Not equal to | `a != b` |
| `<` | Less than | `a < b` |
| `>=` | Greater than or equal to | `a >= b` |

### Logical Operators
| Operator | Description | Example |
|----------|-------------|---------|
| `&&` | Logical AND, true when both operands are non-zero | `a && b` |
| `\\|\\|` | Logical OR, true when either operand is non-zero | `a \\|\\| b` |
| `!` | Logical NOT | `!a` |

### Bitwise Operators
| Operator | Description | Example |
|----------|-------------|---------|
| `&` | Bitwise AND | `a & b` |
| `\\|` | Bitwise OR | `a \\| b` |
| `^` | Bitwise XOR | `a ^ b` |
| `~` | Bitwise complement | `~a` |
| `<<` | Left shift | `a << 2` |
| `>>` | Right shift | `a >> 2` |

### Other Operators
| Operator | Description | Example |
|----------|-------------|---------|
| `?:` | Conditional expression | `x ? a : b` |
| `sizeof` | Size of a type or object in bytes | `sizeof(int)` |
| `->` | Member access through a pointer | `p->next` |

## Control Flow

### Selection Statements
`switch` compares an integer expression against constant `case` labels.
Execution falls through to the next label unless a `break` is reached.

```c
switch (op) {
case '+':
    result = a + b;
    break;
default:
    result = 0;
}
```

| Keyword | Purpose |
|---------|---------|
| `if` | Run a block when the condition is non-zero |
| `else` | Alternative branch of an `if` |
| `switch` | Multi-way branch on an integer expression |
| `case` | Label inside a `switch` matching one constant value |
| `default` | Label taken when no `case` matches |

### Loops
| Keyword | Purpose |
|---------|---------|
| `for` | Counted loop with init, condition and step |
| `while` | Loop while the condition is non-zero |
| `do` | Loop whose body runs at least once |
| `break` | Leave the innermost loop or `switch` |
| `continue` | Skip to the next loop iteration |

## Preprocessor Directives
Directives start with `#` and are handled before compilation.

| Directive | Purpose |
|-----------|---------|
| `#include` | Insert the contents of a header file |
| `#define` | Define a macro |
| `#ifdef` | Compile the block when a macro is defined |
| `#ifndef` | Compile the block when a macro is not defined |
| `#endif` | Close a conditional block |

```c
#ifndef BUFFER_H
#define BUFFER_H
#define BUFFER_SIZE 256
#endif
```

## Functions
A function declares its return type, name and parameter list.

```c
static int add(int a, int b) {
    return a + b;
}
```
"""

VERILOG_GUIDE_TEXT = """# Verilog HDL Syntax Guide

A revision sheet for synthesisable Verilog. Operators look familiar to C
programmers but often act on whole bit vectors.

## Modules
A module is the unit of hardware description; ports are declared in the
header and the body describes behaviour or structure.

```verilog
module and_gate (input wire a, input wire b, output wire y);
    assign y = a & b;
endmodule
```

## Data Types

### Nets and Variables
| Type | Description |
|------|-------------|
| `wire` | Net driven by continuous assignment |
| `reg` | Variable assigned in procedural blocks |
| `integer` | 32-bit signed variable |
| `parameter` | Elaboration-time constant |

### Number Literals
| Literal | Meaning |
|---------|---------|
| `4'b1010` | 4-bit binary value |
| `8'hFF` | 8-bit hexadecimal value |
| `'bz` | High impedance, sized to context |

## Operators

### Arithmetic Operators
| Operator | Description |
|----------|-------------|
| `+` | Addition |
| `-` | Subtraction |
| `*` | Multiplication |
| `**` | Power |

### Logical Operators
| Operator | Description |
|----------|-------------|
| `&&` | Logical AND, 1-bit result, true when both operands are non-zero |
| `\\|\\|` | Logical OR, 1-bit result |
| `!` | Logical negation |

### Bitwise Operators
| Operator | Description |
|----------|-------------|
| `&` | Bitwise AND across vectors |
| `\\|` | Bitwise OR across vectors |
| `^` | Bitwise XOR |
| `~` | Bitwise NOT |

### Reduction Operators
Reduction operators take one vector operand and produce a single bit.

| Operator | Description |
|----------|-------------|
| `~&` | Reduction NAND |
| `~^` | Reduction XNOR |

### Equality Operators
| Operator | Description |
|----------|-------------|
| `==` | Logical equality, X or Z yields X |
| `===` | Case equality, compares X and Z literally |
| `!==` | Case inequality |

### Other Operators
| Operator | Description |
|----------|-------------|
| `?:` | Conditional (multiplexer) |
| `{ }` | Concatenation |
| `<<<` | Arithmetic left shift |

## Procedural Blocks

### Always and Initial
| Keyword | Purpose |
|---------|---------|
| `always` | Block re-executed whenever its sensitivity list fires |
| `initial` | Block executed once at time zero |
| `posedge` | Rising-edge event |
| `negedge` | Falling-edge event |

### Case Statements
The `case` statement compares an expression against each item in order and
runs the first matching branch; there is no fall-through.

```verilog
always @(*) begin
    case (sel)
        2'b00: y = a;
        2'b01: y = b;
        default: y = 1'b0;
    endcase
end
```

| Keyword | Behaviour |
|---------|-----------|
| `case` | Multi-way branch comparing X and Z bits exactly, no fall-through |
| `casez` | Treats Z bits as don't-care |
| `casex` | Treats X and Z bits as don't-care |
| `default` | Branch taken when no item matches |
| `endcase` | Closes a case statement |

## Compiler Directives
| Directive | Purpose |
|-----------|---------|
| `` `define `` | Define a text macro |
| `` `include `` | Insert the contents of another source file |
| `` `timescale `` | Set simulation time unit and precision |
| `` `ifdef `` | Compile the block when a macro is defined |
"""

SAMPLE_GUIDES = {
    "c": C_GUIDE_TEXT,
    "verilog": VERILOG_GUIDE_TEXT,
}


def write_sample_guides(output_dir: str = "data/guides", suffix: str = ".md") -> list[Path]:
    """Write the bundled sample guides to disk, one file per guide id."""
    root = Path(output_dir)
    root.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for guide_id, text in SAMPLE_GUIDES.items():
        path = root / f"{guide_id}{suffix}"
        path.write_text(text, encoding="utf-8")
        written.append(path)
    return written
