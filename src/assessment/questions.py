"""Built-in assessment question bank.

Raw dicts so the bank stays readable; SkillCatalog validates them into
Question models at load time.
"""

from typing import Any

DEFAULT_QUESTIONS: list[dict[str, Any]] = [
    {
        "id": 1,
        "skill": "React",
        "prompt": "What is the purpose of useEffect hook in React?",
        "options": [
            "To create side effects in functional components",
            "To manage component state",
            "To handle component props",
            "To create class components",
        ],
        "correct_answer": 0,
    },
    {
        "id": 2,
        "skill": "React",
        "prompt": "What is JSX?",
        "options": [
            "A JavaScript XML syntax extension",
            "A CSS framework",
            "A testing library",
            "A database query language",
        ],
        "correct_answer": 0,
    },
    {
        "id": 3,
        "skill": "TypeScript",
        "prompt": "What is the main benefit of using TypeScript?",
        "options": [
            "Static type checking",
            "Faster execution",
            "Smaller bundle size",
            "Better styling",
        ],
        "correct_answer": 0,
    },
    {
        "id": 4,
        "skill": "Node.js",
        "prompt": "What is Node.js primarily used for?",
        "options": [
            "Server-side JavaScript runtime",
            "CSS preprocessing",
            "Image editing",
            "Database management",
        ],
        "correct_answer": 0,
    },
    {
        "id": 5,
        "skill": "Python",
        "prompt": "Which keyword is used to define a function in Python?",
        "options": ["def", "function", "func", "define"],
        "correct_answer": 0,
    },
    {
        "id": 6,
        "skill": "AWS",
        "prompt": "What does S3 stand for in AWS?",
        "options": [
            "Simple Storage Service",
            "Secure Server Solution",
            "Standard Storage System",
            "Software Service Stack",
        ],
        "correct_answer": 0,
    },
    {
        "id": 7,
        "skill": "Docker",
        "prompt": "What is Docker primarily used for?",
        "options": [
            "Containerization of applications",
            "Code compilation",
            "Database management",
            "Network routing",
        ],
        "correct_answer": 0,
    },
    {
        "id": 8,
        "skill": "React",
        "prompt": "What is the virtual DOM in React?",
        "options": [
            "A lightweight copy of the actual DOM",
            "A CSS framework",
            "A state management tool",
            "A routing library",
        ],
        "correct_answer": 0,
    },
]
