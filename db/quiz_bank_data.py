"""Pre-authored questions served when quiz generation is unavailable."""

QUIZ_BANK = {
    "Async/Await": {
        "beginner": [
            {
                "question": "What is the main purpose of async/await in JavaScript?",
                "options": {"A": "To make code run faster", "B": "To handle asynchronous operations more readably", "C": "To create new variables", "D": "To reduce memory usage"},
                "answer": "B",
                "explanation": "async/await lets asynchronous code read like sequential code, replacing nested callbacks and long promise chains.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "Which keyword declares an async function?",
                "options": {"A": "await", "B": "async", "C": "promise", "D": "then"},
                "answer": "B",
                "explanation": "The async keyword before a function declaration makes it return a Promise and allows await inside it.",
                "difficulty": "beginner",
                "category": "syntax",
            },
            {
                "question": "What does the await keyword do?",
                "options": {"A": "Pauses the async function until the promise settles", "B": "Creates a new promise", "C": "Throws an error", "D": "Continues execution immediately"},
                "answer": "A",
                "explanation": "await suspends the surrounding async function until the awaited promise resolves or rejects.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "What does an async function always return?",
                "options": {"A": "undefined", "B": "A Promise", "C": "The raw return value", "D": "A callback"},
                "answer": "B",
                "explanation": "Even when an async function returns a plain value, the caller receives a Promise resolved with that value.",
                "difficulty": "beginner",
                "category": "concept",
            },
        ],
        "intermediate": [
            {
                "question": "How do you handle a rejected promise inside an async function?",
                "options": {"A": "Wrap the await in try/catch", "B": "Use a finally block only", "C": "Rejections cannot be handled", "D": "Call process.exit()"},
                "answer": "A",
                "explanation": "A rejected awaited promise throws at the await expression, so try/catch around it handles the error.",
                "difficulty": "intermediate",
                "category": "best-practice",
            },
            {
                "question": "Which call runs two independent requests concurrently and waits for both?",
                "options": {"A": "await a(); await b();", "B": "await Promise.all([a(), b()])", "C": "await Promise.race([a(), b()])", "D": "a().then(b)"},
                "answer": "B",
                "explanation": "Promise.all starts both promises before awaiting, so they run concurrently and resolve together.",
                "code_snippet": "const [user, posts] = await Promise.all([getUser(), getPosts()]);",
                "difficulty": "intermediate",
                "category": "best-practice",
            },
            {
                "question": "What happens if you forget to await a promise-returning call?",
                "options": {"A": "The variable holds the pending Promise", "B": "A syntax error is raised", "C": "The call is skipped", "D": "The function blocks forever"},
                "answer": "A",
                "explanation": "Without await you get the Promise object itself rather than its resolved value.",
                "difficulty": "intermediate",
                "category": "debugging",
            },
        ],
        "advanced": [
            {
                "question": "Why can using await inside a forEach callback produce unexpected ordering?",
                "options": {"A": "forEach does not wait for the async callbacks it calls", "B": "forEach runs callbacks in reverse", "C": "await is ignored in arrow functions", "D": "forEach only accepts sync functions and throws"},
                "answer": "A",
                "explanation": "forEach discards the promises returned by async callbacks, so the loop finishes before the awaited work does.",
                "code_snippet": "items.forEach(async (item) => { await save(item); });\nconsole.log('done'); // runs before saves finish",
                "difficulty": "advanced",
                "category": "debugging",
            },
            {
                "question": "Which Promise combinator resolves with the outcome of every promise, including rejections?",
                "options": {"A": "Promise.all", "B": "Promise.any", "C": "Promise.allSettled", "D": "Promise.race"},
                "answer": "C",
                "explanation": "Promise.allSettled never short-circuits; it reports a status object for each input promise.",
                "difficulty": "advanced",
                "category": "concept",
            },
            {
                "question": "When does code after an await in an async function run relative to the current call stack?",
                "options": {"A": "Synchronously, before the caller continues", "B": "As a microtask after the current stack empties", "C": "On the next macrotask only", "D": "In a separate thread"},
                "answer": "B",
                "explanation": "The continuation after await is scheduled as a microtask, so the caller's synchronous code runs first.",
                "difficulty": "advanced",
                "category": "concept",
            },
        ],
    },
    "Closures": {
        "beginner": [
            {
                "question": "What is a closure in JavaScript?",
                "options": {"A": "A function bundled with references to its surrounding scope", "B": "A way to close a browser window", "C": "A loop that ends early", "D": "A private class field"},
                "answer": "A",
                "explanation": "A closure is a function that keeps access to variables from the scope where it was created.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "What does the following code log?",
                "options": {"A": "undefined", "B": "0", "C": "1", "D": "ReferenceError"},
                "answer": "C",
                "explanation": "The returned function closes over count, so calling it increments and returns 1.",
                "code_snippet": "function makeCounter() {\n  let count = 0;\n  return () => ++count;\n}\nconst next = makeCounter();\nconsole.log(next());",
                "difficulty": "beginner",
                "category": "syntax",
            },
            {
                "question": "When is a closure created?",
                "options": {"A": "Only when a function is exported", "B": "Every time a function is created", "C": "Only inside classes", "D": "Only when using var"},
                "answer": "B",
                "explanation": "Every function captures its lexical environment at creation time.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "Which common use of closures keeps data private?",
                "options": {"A": "The module pattern", "B": "Array destructuring", "C": "Template literals", "D": "JSON.stringify"},
                "answer": "A",
                "explanation": "The module pattern exposes functions that close over variables the outside code cannot reach directly.",
                "difficulty": "beginner",
                "category": "best-practice",
            },
        ],
        "intermediate": [
            {
                "question": "Why does this loop log 3, 3, 3?",
                "options": {"A": "var is function-scoped, so every callback shares one i", "B": "setTimeout copies i at the end", "C": "Closures cannot read loop variables", "D": "console.log is asynchronous"},
                "answer": "A",
                "explanation": "All callbacks close over the same var binding, which is 3 when they run; let creates a new binding per iteration.",
                "code_snippet": "for (var i = 0; i < 3; i++) {\n  setTimeout(() => console.log(i));\n}",
                "difficulty": "intermediate",
                "category": "debugging",
            },
            {
                "question": "Do two counters made by the same factory function share state?",
                "options": {"A": "Yes, they share one count", "B": "No, each call creates a new scope", "C": "Only in strict mode", "D": "Only if declared with const"},
                "answer": "B",
                "explanation": "Each factory invocation creates a fresh lexical environment, so each counter has its own variable.",
                "difficulty": "intermediate",
                "category": "concept",
            },
            {
                "question": "What is partial application built on closures?",
                "options": {"A": "Fixing some arguments of a function and returning a function for the rest", "B": "Calling a function with too many arguments", "C": "Deleting unused parameters", "D": "Running a function only once"},
                "answer": "A",
                "explanation": "The returned function closes over the arguments supplied first.",
                "code_snippet": "const add = (a) => (b) => a + b;\nconst addFive = add(5);",
                "difficulty": "intermediate",
                "category": "best-practice",
            },
        ],
        "advanced": [
            {
                "question": "How can closures cause memory leaks in long-lived applications?",
                "options": {"A": "They keep captured objects reachable after they are no longer needed", "B": "They duplicate the call stack", "C": "They disable garbage collection", "D": "They allocate a new thread"},
                "answer": "A",
                "explanation": "Anything referenced by a live closure, such as a large object in a registered event handler, cannot be collected.",
                "difficulty": "advanced",
                "category": "debugging",
            },
            {
                "question": "What does a memoize helper rely on to keep its cache between calls?",
                "options": {"A": "A global variable", "B": "A closure over a cache object", "C": "The this binding", "D": "Function hoisting"},
                "answer": "B",
                "explanation": "The returned wrapper closes over the cache created once in the outer function.",
                "code_snippet": "function memoize(fn) {\n  const cache = new Map();\n  return (x) => cache.has(x) ? cache.get(x) : cache.set(x, fn(x)).get(x);\n}",
                "difficulty": "advanced",
                "category": "best-practice",
            },
        ],
    },
    "Recursion": {
        "beginner": [
            {
                "question": "What is recursion?",
                "options": {"A": "A function calling itself", "B": "A loop with a counter", "C": "A variable pointing to itself", "D": "An infinite loop"},
                "answer": "A",
                "explanation": "A recursive function solves a problem by calling itself on smaller inputs.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "What is the role of a base case?",
                "options": {"A": "It stops the recursion", "B": "It speeds up the function", "C": "It declares variables", "D": "It handles errors"},
                "answer": "A",
                "explanation": "The base case returns without recursing, which guarantees the calls eventually end.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "What does factorial(3) return?",
                "options": {"A": "3", "B": "6", "C": "9", "D": "1"},
                "answer": "B",
                "explanation": "factorial(3) = 3 * 2 * 1 = 6.",
                "code_snippet": "def factorial(n):\n    return 1 if n <= 1 else n * factorial(n - 1)",
                "difficulty": "beginner",
                "category": "syntax",
            },
        ],
        "intermediate": [
            {
                "question": "What error do you get when recursion never reaches its base case?",
                "options": {"A": "Stack overflow / maximum recursion depth exceeded", "B": "Syntax error", "C": "Type error", "D": "Nothing, it returns None"},
                "answer": "A",
                "explanation": "Each call adds a stack frame; without a base case the stack limit is eventually hit.",
                "difficulty": "intermediate",
                "category": "debugging",
            },
            {
                "question": "Why is naive recursive Fibonacci slow?",
                "options": {"A": "It recomputes the same subproblems many times", "B": "Recursion is always slow", "C": "It uses floating point", "D": "It allocates large lists"},
                "answer": "A",
                "explanation": "fib(n) calls fib(n-1) and fib(n-2), which overlap heavily and give exponential time; memoization fixes it.",
                "difficulty": "intermediate",
                "category": "best-practice",
            },
        ],
        "advanced": [
            {
                "question": "What is a tail call?",
                "options": {"A": "A recursive call that is the last action of the function", "B": "The first call in a chain", "C": "A call inside a loop", "D": "A call that returns None"},
                "answer": "A",
                "explanation": "In a tail call nothing remains to do after the call returns, which lets some runtimes reuse the stack frame.",
                "difficulty": "advanced",
                "category": "concept",
            },
            {
                "question": "Does CPython perform tail-call optimization?",
                "options": {"A": "Yes, always", "B": "No", "C": "Only for lambdas", "D": "Only with -O"},
                "answer": "B",
                "explanation": "CPython keeps every frame, so deep recursion is limited by sys.getrecursionlimit().",
                "difficulty": "advanced",
                "category": "concept",
            },
        ],
    },
    "Python": {
        "beginner": [
            {
                "question": "Which keyword defines a function in Python?",
                "options": {"A": "func", "B": "def", "C": "function", "D": "lambda"},
                "answer": "B",
                "explanation": "Functions are defined with def followed by the name and parameters.",
                "difficulty": "beginner",
                "category": "syntax",
            },
            {
                "question": "Which of these types is immutable?",
                "options": {"A": "list", "B": "dict", "C": "tuple", "D": "set"},
                "answer": "C",
                "explanation": "Tuples cannot be changed after creation.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "What does len([1, 2, 3]) return?",
                "options": {"A": "2", "B": "3", "C": "4", "D": "None"},
                "answer": "B",
                "explanation": "len returns the number of items in a container.",
                "difficulty": "beginner",
                "category": "syntax",
            },
        ],
        "intermediate": [
            {
                "question": "What is printed by this code?",
                "options": {"A": "[1]\\n[1]", "B": "[1]\\n[1, 1]", "C": "[1, 1]\\n[1, 1]", "D": "An error"},
                "answer": "B",
                "explanation": "Default arguments are evaluated once, so the same list is reused across calls.",
                "code_snippet": "def append_one(items=[]):\n    items.append(1)\n    return items\n\nprint(append_one())\nprint(append_one())",
                "difficulty": "intermediate",
                "category": "debugging",
            },
            {
                "question": "What does a list comprehension return?",
                "options": {"A": "A generator", "B": "A new list", "C": "A tuple", "D": "None"},
                "answer": "B",
                "explanation": "[expr for x in iterable] builds a new list; use parentheses for a generator expression.",
                "difficulty": "intermediate",
                "category": "syntax",
            },
            {
                "question": "What is the preferred way to open a file so it is always closed?",
                "options": {"A": "f = open(path) and rely on garbage collection", "B": "with open(path) as f:", "C": "os.open(path)", "D": "open(path).close() first"},
                "answer": "B",
                "explanation": "The with statement closes the file even when an exception is raised.",
                "difficulty": "intermediate",
                "category": "best-practice",
            },
        ],
        "advanced": [
            {
                "question": "What does the GIL prevent in CPython?",
                "options": {"A": "Multiple threads executing Python bytecode at the same time", "B": "Running more than one process", "C": "Using asyncio", "D": "Importing C extensions"},
                "answer": "A",
                "explanation": "The global interpreter lock lets only one thread run bytecode at a time; CPU-bound work needs processes.",
                "difficulty": "advanced",
                "category": "concept",
            },
            {
                "question": "Which method makes an object usable in a with statement?",
                "options": {"A": "__iter__ and __next__", "B": "__enter__ and __exit__", "C": "__call__", "D": "__getitem__"},
                "answer": "B",
                "explanation": "Context managers implement __enter__ and __exit__.",
                "difficulty": "advanced",
                "category": "syntax",
            },
            {
                "question": "What does a generator function return when called?",
                "options": {"A": "The first yielded value", "B": "A generator object", "C": "A list of all values", "D": "None"},
                "answer": "B",
                "explanation": "Calling a function containing yield returns a generator; its body runs lazily on iteration.",
                "difficulty": "advanced",
                "category": "concept",
            },
        ],
    },
    "JavaScript": {
        "beginner": [
            {
                "question": "Which keyword declares a block-scoped variable that cannot be reassigned?",
                "options": {"A": "var", "B": "let", "C": "const", "D": "static"},
                "answer": "C",
                "explanation": "const creates a block-scoped binding that cannot be reassigned.",
                "difficulty": "beginner",
                "category": "syntax",
            },
            {
                "question": "What does typeof null return?",
                "options": {"A": "'null'", "B": "'object'", "C": "'undefined'", "D": "'number'"},
                "answer": "B",
                "explanation": "typeof null is 'object', a long-standing quirk of the language.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "Which operator compares without type coercion?",
                "options": {"A": "==", "B": "===", "C": "=", "D": "!="},
                "answer": "B",
                "explanation": "=== checks value and type; == coerces operands first.",
                "difficulty": "beginner",
                "category": "best-practice",
            },
        ],
        "intermediate": [
            {
                "question": "What does Array.prototype.map return?",
                "options": {"A": "The original array, modified", "B": "A new array of callback results", "C": "undefined", "D": "The first matching element"},
                "answer": "B",
                "explanation": "map returns a new array and leaves the original untouched.",
                "difficulty": "intermediate",
                "category": "syntax",
            },
            {
                "question": "How does this behave inside an arrow function?",
                "options": {"A": "It is bound to the global object", "B": "It is inherited from the enclosing scope", "C": "It is always undefined", "D": "It refers to the arrow function"},
                "answer": "B",
                "explanation": "Arrow functions do not have their own this; they use the surrounding lexical this.",
                "difficulty": "intermediate",
                "category": "concept",
            },
        ],
        "advanced": [
            {
                "question": "In which order are these logged?",
                "options": {"A": "1 2 3", "B": "1 3 2", "C": "2 1 3", "D": "3 1 2"},
                "answer": "B",
                "explanation": "Synchronous code runs first; the resolved promise callback runs as a microtask afterwards.",
                "code_snippet": "console.log(1);\nPromise.resolve().then(() => console.log(2));\nconsole.log(3);",
                "difficulty": "advanced",
                "category": "concept",
            },
            {
                "question": "What does Object.freeze do to nested objects?",
                "options": {"A": "Freezes them too", "B": "Nothing, the freeze is shallow", "C": "Deletes them", "D": "Copies them"},
                "answer": "B",
                "explanation": "Object.freeze is shallow; nested objects remain mutable unless frozen separately.",
                "difficulty": "advanced",
                "category": "debugging",
            },
        ],
    },
    "SQL": {
        "beginner": [
            {
                "question": "Which statement retrieves rows from a table?",
                "options": {"A": "GET", "B": "SELECT", "C": "FETCH", "D": "READ"},
                "answer": "B",
                "explanation": "SELECT queries rows from one or more tables.",
                "difficulty": "beginner",
                "category": "syntax",
            },
            {
                "question": "Which clause filters rows before grouping?",
                "options": {"A": "WHERE", "B": "HAVING", "C": "ORDER BY", "D": "LIMIT"},
                "answer": "A",
                "explanation": "WHERE filters individual rows; HAVING filters groups after GROUP BY.",
                "difficulty": "beginner",
                "category": "concept",
            },
        ],
        "intermediate": [
            {
                "question": "Which join returns all rows from the left table even without a match?",
                "options": {"A": "INNER JOIN", "B": "LEFT JOIN", "C": "CROSS JOIN", "D": "SELF JOIN"},
                "answer": "B",
                "explanation": "LEFT JOIN keeps every left row and fills missing right columns with NULL.",
                "difficulty": "intermediate",
                "category": "concept",
            },
            {
                "question": "How should user input be passed to a SQL query?",
                "options": {"A": "String concatenation", "B": "Parameterized queries", "C": "Escaping quotes by hand", "D": "Base64 encoding"},
                "answer": "B",
                "explanation": "Bound parameters keep data separate from SQL text and prevent injection.",
                "difficulty": "intermediate",
                "category": "best-practice",
            },
        ],
        "advanced": [
            {
                "question": "What does a window function like ROW_NUMBER() OVER (PARTITION BY ...) do?",
                "options": {"A": "Collapses rows into one per group", "B": "Computes a value per row across a related set of rows", "C": "Creates a temporary table", "D": "Locks the partition"},
                "answer": "B",
                "explanation": "Window functions compute over a partition while keeping every input row in the result.",
                "difficulty": "advanced",
                "category": "concept",
            },
            {
                "question": "Why might an index on a column not be used for WHERE LOWER(email) = ?",
                "options": {"A": "Indexes never help WHERE clauses", "B": "The function on the column prevents using a plain index", "C": "LOWER is not valid SQL", "D": "Email columns cannot be indexed"},
                "answer": "B",
                "explanation": "Wrapping the column in a function needs an expression index matching LOWER(email).",
                "difficulty": "advanced",
                "category": "debugging",
            },
        ],
    },
    "Data Structures": {
        "beginner": [
            {
                "question": "Which data structure is last-in, first-out?",
                "options": {"A": "Queue", "B": "Stack", "C": "Tree", "D": "Graph"},
                "answer": "B",
                "explanation": "A stack removes the most recently added element first.",
                "difficulty": "beginner",
                "category": "concept",
            },
            {
                "question": "What is the average lookup time of a hash map?",
                "options": {"A": "O(1)", "B": "O(log n)", "C": "O(n)", "D": "O(n log n)"},
                "answer": "A",
                "explanation": "Hashing locates a key's bucket directly, giving constant average time.",
                "difficulty": "beginner",
                "category": "concept",
            },
        ],
        "intermediate": [
            {
                "question": "What is the height of a balanced binary search tree with n nodes?",
                "options": {"A": "O(1)", "B": "O(log n)", "C": "O(n)", "D": "O(n^2)"},
                "answer": "B",
                "explanation": "Balancing keeps the height logarithmic, so search, insert and delete stay O(log n).",
                "difficulty": "intermediate",
                "category": "concept",
            },
            {
                "question": "Which structure efficiently returns the smallest element repeatedly?",
                "options": {"A": "Min-heap", "B": "Linked list", "C": "Stack", "D": "Hash set"},
                "answer": "A",
                "explanation": "A min-heap gives O(1) access to the minimum and O(log n) removal.",
                "difficulty": "intermediate",
                "category": "best-practice",
            },
        ],
        "advanced": [
            {
                "question": "What is the amortized cost of appending to a dynamic array?",
                "options": {"A": "O(1)", "B": "O(log n)", "C": "O(n)", "D": "O(n^2)"},
                "answer": "A",
                "explanation": "Occasional O(n) resizes are spread over many O(1) appends when capacity grows geometrically.",
                "difficulty": "advanced",
                "category": "concept",
            },
            {
                "question": "Which structure supports near-constant union and find operations?",
                "options": {"A": "Trie", "B": "Disjoint-set with path compression", "C": "AVL tree", "D": "Skip list"},
                "answer": "B",
                "explanation": "Union by rank with path compression gives inverse-Ackermann amortized time.",
                "difficulty": "advanced",
                "category": "concept",
            },
        ],
    },
}
