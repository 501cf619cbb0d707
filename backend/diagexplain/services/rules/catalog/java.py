from __future__ import annotations

"""backend/diagexplain/services/rules/catalog/java.py

Built-in Java rules. javac messages carry no numeric code, so every rule
here is guarded by a message pattern.
"""

JAVA_RULES: list[dict] = [
    {
        "language": "java",
        "error_type": "NullReference",
        "message_pattern": "NullPointerException",
        "priority": 10,
        "template": {
            "title": "You're accessing something that's null",
            "calm_message": "NullPointerException is Java's most common error. Welcome to the club.",
            "explanation": (
                "You're trying to use an object (calling a method or accessing a field) "
                "but the object is null at this point."
            ),
            "likely_causes": [
                "The object wasn't initialized",
                "A method returned null",
                "An optional value is missing",
                "Array or collection element is null",
            ],
            "next_steps": [
                "Add a null check: `if (object != null) { ... }`",
                "Check where the object is created: is it always initialized?",
                "Use Optional<T> for values that might be null",
                "Add debug logging to see when the value becomes null",
                "Look for the exact line number in the stack trace",
            ],
            "confidence_boost": "After a few of these, you'll develop a sixth sense for null checks.",
            "confidence": 0.95,
        },
    },
    {
        "language": "java",
        "error_type": "UndeclaredIdentifier",
        "message_pattern": "cannot find symbol",
        "priority": 10,
        "template": {
            "title": "Java can't find this symbol",
            "calm_message": "Usually a missing import or typo, easy to fix.",
            "explanation": "You're using a class, method, or variable that Java doesn't know about.",
            "likely_causes": [
                "Missing import statement",
                "Typo in the class or variable name",
                "The class is in a different package",
                "Haven't declared the variable yet",
            ],
            "next_steps": [
                "Add the import: `import package.name.ClassName;`",
                "Check spelling; Java is case-sensitive",
                "Verify the variable is declared before this line",
                "Use your IDE's quick fix (Alt+Enter / Cmd+1)",
                "Make sure the class is in your classpath",
            ],
            "confidence": 0.95,
        },
    },
    {
        "language": "java",
        "error_type": "TypeMismatch",
        "message_pattern": "incompatible types|cannot be converted to",
        "priority": 10,
        "template": {
            "title": "Type mismatch in your code",
            "calm_message": "Java's strong typing is helping you avoid bugs. This is good.",
            "explanation": (
                "You're trying to assign or pass a value of one type where a different "
                "type is expected."
            ),
            "likely_causes": [
                "Passing wrong type to a method",
                "Trying to assign incompatible types",
                "Mixing int with double, or String with int",
                "Need to cast or convert the value",
            ],
            "next_steps": [
                "Check the expected type vs. what you're providing",
                "Add a type cast if appropriate: `(TargetType) value`",
                "Convert the value: `Integer.parseInt()`, `String.valueOf()`, etc.",
                "Verify method signatures match what you're calling",
                "Look at both sides of the assignment or comparison",
            ],
            "confidence": 0.9,
        },
    },
    {
        "language": "java",
        "error_type": "MissingImport",
        "message_pattern": "cannot be resolved to a type",
        "priority": 10,
        "template": {
            "title": "Can't resolve this type",
            "calm_message": "Missing imports are super common when writing Java.",
            "explanation": (
                "Java can't find the class you're referencing, usually because it's not imported."
            ),
            "likely_causes": [
                "Need to add an import statement",
                "Class is in a different package",
                "Library isn't in your dependencies",
                "Typo in the class name",
            ],
            "next_steps": [
                "Add import at the top: `import com.example.ClassName;`",
                "Use IDE's organize imports (Ctrl+Shift+O / Cmd+Shift+O)",
                "Check if the library is in your pom.xml or build.gradle",
                "Verify the class name and package are correct",
                "Make sure the dependency is downloaded",
            ],
            "confidence": 0.95,
        },
    },
    {
        "language": "java",
        "error_type": "OutOfBounds",
        "message_pattern": "ArrayIndexOutOfBoundsException",
        "priority": 10,
        "template": {
            "title": "Array index is out of bounds",
            "calm_message": "Off-by-one errors happen to everyone, even experienced developers.",
            "explanation": "You're trying to access an array element at an index that doesn't exist.",
            "likely_causes": [
                "Using an index >= array.length",
                "Using a negative index",
                "Off-by-one error in a loop",
                "Array is empty or smaller than expected",
            ],
            "next_steps": [
                "Check your array bounds: valid indices are 0 to length-1",
                "Add bounds checking: `if (index >= 0 && index < array.length)`",
                "Print array.length to see the actual size",
                "Review your loop conditions (< vs <=)",
                "Check if the array is being populated correctly",
            ],
            "confidence_boost": "Array indexing becomes second nature with practice.",
            "confidence": 0.9,
        },
    },
    {
        "language": "java",
        "error_type": "SyntaxError",
        "message_pattern": "expected|illegal start|not a statement",
        "priority": 5,
        "template": {
            "title": "Syntax error in your code",
            "calm_message": "Syntax errors are easy to make and usually easy to fix.",
            "explanation": "There's a problem with how your code is written. Java can't parse it.",
            "likely_causes": [
                "Missing or extra semicolon",
                "Mismatched brackets or braces",
                "Typo in a keyword",
                "Missing closing quote or parenthesis",
            ],
            "next_steps": [
                "Check the line mentioned and the line right before it",
                "Count your brackets: `()`, `{}`, `[]`",
                "Look for the red underline in your IDE",
                "Make sure all statements end with semicolons",
                "Format your code to see the structure better",
            ],
            "confidence": 0.8,
        },
    },
]
