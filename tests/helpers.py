from bookquiz.question.question import Question

Q1 = Question("2+2?", "3", "4", "5", "6", "b")
Q2 = Question("3+3?", "6", "7", "8", "9", "a")
Q3 = Question("Capital of France?", "Rome", "Madrid", "Paris", "Berlin", "c")
Q4 = Question("Largest planet?", "Mars", "Venus", "Earth", "Jupiter", "d")
