"""Small helpers for characters, bytes, strings, linked lists, output, printf and line reading."""