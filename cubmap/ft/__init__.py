"""Small character, string, memory and linked-list helpers."""