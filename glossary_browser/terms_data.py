"""
Design (terms_data.py)
- Purpose: The hardcoded glossary shown at startup, as (name, description) pairs.
- Inputs: None.
- Outputs: TERMS (list of tuples) and load_terms() -> TermStore.
- Side effects: None; the list is only read.
- Thread-safety: Read-only after import.
"""

from typing import List, Tuple

from .repository import TermStore

TERMS: List[Tuple[str, str]] = [
    ("Abstraction", "Hiding implementation details behind a simpler interface so callers depend only on what something does."),
    ("Algorithm", "A finite, well-defined sequence of steps that solves a problem or computes a result."),
    ("API", "Application Programming Interface: the set of operations a component exposes for other code to use."),
    ("Argument", "A value passed to a function or method when it is called."),
    ("Array", "A collection of elements stored in contiguous positions and addressed by index."),
    ("Assertion", "A statement that a condition holds at a point in a program, checked at run time."),
    ("Asynchronous", "Work that proceeds without blocking the caller, which is notified or resumed when it completes."),
    ("Backend", "The server-side part of a system that stores data and runs business logic."),
    ("Big O notation", "A way to describe how an algorithm's running time or memory grows with input size."),
    ("Binary search", "Finding an item in a sorted sequence by repeatedly halving the range that could contain it."),
    ("Bit", "The smallest unit of data, holding either 0 or 1."),
    ("Boolean", "A type with exactly two values, true and false."),
    ("Branch", "An independent line of development in version control."),
    ("Breakpoint", "A marker that pauses program execution in a debugger at a chosen line."),
    ("Buffer", "A region of memory that temporarily holds data while it moves between places."),
    ("Bug", "A defect that makes a program behave differently from what was intended."),
    ("Byte", "A group of eight bits, the usual unit for addressing memory."),
    ("Cache", "A fast store of previously computed or fetched results, kept to avoid repeating the work."),
    ("Callback", "A function passed to other code to be called later, often when an event happens."),
    ("Class", "A blueprint that defines the data and behaviour shared by a family of objects."),
    ("Closure", "A function bundled with the variables from the scope where it was created."),
    ("Commit", "A recorded snapshot of changes in a version control repository."),
    ("Compiler", "A program that translates source code into a lower-level form such as machine code or bytecode."),
    ("Concurrency", "Structuring a program as independently progressing tasks whose lifetimes overlap."),
    ("Constant", "A named value that does not change while the program runs."),
    ("Constructor", "A special method that initialises a newly created object."),
    ("Coroutine", "A function that can suspend itself and later resume where it left off."),
    ("CSV", "Comma-Separated Values: a plain-text table format with one record per line."),
    ("Daemon", "A background process that runs without direct user interaction."),
    ("Data structure", "A way of organising data so that particular operations on it are efficient."),
    ("Deadlock", "A state where two or more tasks each wait for a resource the other holds, so none can proceed."),
    ("Debugger", "A tool for running a program step by step and inspecting its state."),
    ("Decorator", "A callable that wraps a function or class to extend its behaviour without changing its code."),
    ("Dependency", "An external package or component that a piece of software needs in order to work."),
    ("Deployment", "Releasing a build of software into an environment where it runs."),
    ("Dictionary", "A mapping from unique keys to values with fast lookup by key."),
    ("Encapsulation", "Keeping an object's internal state private and exposing behaviour through methods."),
    ("Encoding", "A rule for representing characters or data as bytes."),
    ("Enum", "A type whose values are a fixed set of named constants."),
    ("Exception", "An object signalling an error or unusual condition that interrupts normal flow."),
    ("Expression", "A piece of code that evaluates to a value."),
    ("Framework", "A reusable skeleton that calls into your code, defining the overall structure of an application."),
    ("Frontend", "The user-facing part of an application that runs in the browser or on the desktop."),
    ("Function", "A named, reusable block of code that takes arguments and may return a value."),
    ("Garbage collection", "Automatic reclaiming of memory occupied by objects that are no longer reachable."),
    ("Generator", "A function that produces a sequence of values lazily, one at a time."),
    ("Git", "A distributed version control system that tracks changes as a graph of commits."),
    ("Hash function", "A function mapping data of any size to a fixed-size value, used for lookup and integrity checks."),
    ("Hash table", "A data structure that stores key-value pairs in buckets chosen by hashing the key."),
    ("Heap", "A tree-shaped structure where each parent is ordered relative to its children, used for priority queues."),
    ("HTTP", "Hypertext Transfer Protocol: the request/response protocol of the web."),
    ("IDE", "Integrated Development Environment: an editor bundled with build, run and debug tools."),
    ("Immutable", "Describes a value that cannot be changed after it is created."),
    ("Inheritance", "Defining a class in terms of another so that it reuses and extends its behaviour."),
    ("Integer", "A whole number without a fractional part."),
    ("Interface", "A contract listing the operations a type must provide, without saying how."),
    ("Interpreter", "A program that executes source code or bytecode directly, statement by statement."),
    ("Iterator", "An object that yields the elements of a collection one at a time."),
    ("JSON", "JavaScript Object Notation: a text format for nested objects, arrays, strings and numbers."),
    ("Keyword", "A reserved word with special meaning in a programming language."),
    ("Lambda", "A small anonymous function written inline as an expression."),
    ("Latency", "The delay between a request being made and its response arriving."),
    ("Library", "A collection of reusable code that your program calls into."),
    ("Linked list", "A sequence of nodes where each node points to the next one."),
    ("Linter", "A tool that analyses source code for likely errors and style problems."),
    ("List comprehension", "A compact expression that builds a list by transforming and filtering another iterable."),
    ("Loop", "A construct that repeats a block of code while a condition holds or over a collection."),
    ("Memoization", "Caching a function's results by its arguments so repeated calls are instant."),
    ("Merge", "Combining the changes from two branches into one."),
    ("Method", "A function defined on a class and called on its instances."),
    ("Module", "A file of code that groups related definitions and can be imported."),
    ("Mutex", "A lock that allows only one thread at a time into a critical section."),
    ("Namespace", "A context in which names are unique, preventing clashes between identifiers."),
    ("Null", "A special value meaning 'no value' or 'no object'."),
    ("Object", "An instance of a class, bundling state with the methods that operate on it."),
    ("Operator", "A symbol such as + or == that performs an operation on operands."),
    ("Package", "A directory of modules distributed and imported as a unit."),
    ("Pagination", "Splitting a long list of results into fixed-size pages shown one at a time."),
    ("Parameter", "A named variable in a function definition that receives an argument."),
    ("Parser", "A component that turns text into a structured representation such as a syntax tree."),
    ("Pointer", "A value holding the memory address of another value."),
    ("Polymorphism", "Using one interface for values of different types, each responding in its own way."),
    ("Process", "A running program with its own memory space, managed by the operating system."),
    ("Queue", "A first-in, first-out collection where items leave in the order they arrived."),
    ("Race condition", "A bug where the outcome depends on the unpredictable timing of concurrent operations."),
    ("Recursion", "A function solving a problem by calling itself on smaller instances of it."),
    ("Refactoring", "Restructuring code to improve its design without changing its behaviour."),
    ("Regular expression", "A pattern language for matching and extracting text."),
    ("Repository", "A storage location for a project's files and their version history."),
    ("REST", "An architectural style for web APIs built on resources, URLs and standard HTTP verbs."),
    ("Runtime", "The period when a program is executing, or the environment that supports it."),
    ("Scope", "The region of a program where a name is visible and can be used."),
    ("SDK", "Software Development Kit: libraries, tools and docs for building on a platform."),
    ("Serialization", "Converting an in-memory object into a format that can be stored or transmitted."),
    ("Singleton", "A design pattern ensuring that a class has only one instance."),
    ("SQL", "Structured Query Language: the standard language for querying relational databases."),
    ("Stack", "A last-in, first-out collection where the most recently added item leaves first."),
    ("Stack trace", "The list of active function calls at the point an error occurred."),
    ("String", "A sequence of characters, used to represent text."),
    ("Syntax", "The rules that define which sequences of symbols form valid programs in a language."),
    ("Thread", "The smallest unit of execution scheduled by the operating system, sharing memory with its process."),
    ("Tuple", "An ordered, fixed-length, usually immutable group of values."),
    ("Type hint", "An annotation stating the expected type of a variable, parameter or return value."),
    ("Unit test", "An automated test that checks one small piece of code in isolation."),
    ("Variable", "A name bound to a value that a program can read and update."),
    ("Version control", "A system that records changes to files over time so earlier versions can be recalled."),
    ("Virtual environment", "An isolated directory of installed packages used by one project."),
]


def load_terms() -> TermStore:
    """Build the startup TermStore from TERMS. Call once at startup."""
    return TermStore.from_pairs(TERMS)
