"""Built-in question table used when no bundled or imported bank is available."""

from __future__ import annotations

from trivia_app.core.question_bank import QuestionBank, parse_question_bank

DEFAULT_QUESTION_DATA = {
    "nodejs": {
        "easy": [
            { "id": 1, "question": "Which command is used to install packages from a `package.json` file?", "options": ["npm start", "npm install", "npm run", "npm get"], "answer": "npm install", "explanation": "The `npm install` command is used to install all dependencies listed in your `package.json` file." },
            { "id": 2, "question": "What is the purpose of the `require()` function in Node.js?", "options": ["To define a new function", "To import modules", "To declare a variable", "To run a script"], "answer": "To import modules", "explanation": "The `require()` function is used to import and use modules (both built-in and external) in a Node.js application." },
            { "id": 3, "question": "What is Node.js built on?", "options": ["Java Virtual Machine", "Python Interpreter", "Google Chrome's V8 Engine", "Apache Server"], "answer": "Google Chrome's V8 Engine", "explanation": "Node.js is a JavaScript runtime built on the V8 engine, which compiles JavaScript code to machine code for fast execution." }
        ],
        "medium": [
            { "id": 4, "question": "What is a 'stream' in Node.js?", "options": ["A data pipe for continuous data flow", "A type of database", "A module for creating animations", "A network connection protocol"], "answer": "A data pipe for continuous data flow", "explanation": "Streams are objects that allow you to read or write data in a continuous, sequential manner, handling data in chunks rather than all at once." },
            { "id": 5, "question": "What is a 'middleware' in Express.js?", "options": ["A function that only handles errors", "A function that is executed before a route handler", "A tool for creating a database schema", "A class for managing user sessions"], "answer": "A function that is executed before a route handler", "explanation": "Middleware functions in Express.js have access to the request and response objects and are used to perform tasks like authentication and logging before a request reaches its final destination." }
        ],
        "hard": [
            { "id": 6, "question": "What is the Reactor Pattern in Node.js?", "options": ["A design pattern for creating web servers", "A pattern for managing asynchronous I/O with an event loop", "A method for handling database connections", "A framework for building APIs"], "answer": "A pattern for managing asynchronous I/O with an event loop", "explanation": "The Reactor Pattern is an event-driven design for handling service requests that come in from multiple clients. It uses an event loop to handle requests and dispatch them to appropriate handlers." },
            { "id": 7, "question": "What is the purpose of `EventEmitter`?", "options": ["To handle network requests", "To read and write files", "To manage and emit events with listeners", "To manage sessions"], "answer": "To manage and emit events with listeners", "explanation": "The `EventEmitter` class is a core part of Node.js's event-driven architecture. It provides a way for objects to emit named events that trigger functions attached to those events." }
        ]
    },
    "laravel": {
        "easy": [
            { "id": 1, "question": "Which framework is Laravel built on?", "options": ["React", "PHP", "Express", "Django"], "answer": "PHP", "explanation": "Laravel is a popular open-source PHP web framework." },
            { "id": 2, "question": "What is the command to create a new Laravel project?", "options": ["`laravel new app-name`", "`create-laravel app-name`", "`composer create-project laravel/laravel app-name`", "`npm new app-name`"], "answer": "`composer create-project laravel/laravel app-name`", "explanation": "You use Composer, a PHP dependency manager, to create new Laravel projects." }
        ],
        "medium": [
            { "id": 3, "question": "What is Eloquent in Laravel?", "options": ["A database migration tool", "A templating engine", "An ORM (Object-Relational Mapper)", "A command-line interface"], "answer": "An ORM (Object-Relational Mapper)", "explanation": "Eloquent is Laravel's powerful ORM that makes it easy to interact with your database using object-oriented syntax." },
            { "id": 4, "question": "What command runs all database migrations?", "options": ["`php artisan migrate`", "`php artisan db:migrate`", "`php artisan run:migrations`", "`php artisan schema:run`"], "answer": "`php artisan migrate`", "explanation": "The `php artisan migrate` command runs all of your pending migrations." }
        ],
        "hard": [
            { "id": 5, "question": "How do you define a one-to-many relationship in Eloquent?", "options": ["`hasMany` and `belongsTo`", "`hasOne` and `hasMany`", "`belongsToMany` and `hasOne`", "`hasOne` and `belongsTo`"], "answer": "`hasMany` and `belongsTo`", "explanation": "The 'one' side of the relationship uses `hasMany` while the 'many' side uses `belongsTo`." }
        ]
    }
}


def default_question_bank() -> QuestionBank:
    """Return a freshly parsed copy of the built-in table."""
    return parse_question_bank(DEFAULT_QUESTION_DATA)
