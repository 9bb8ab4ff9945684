"""Scan two small programs and print every token."""

from minilex import tokenize

FIRST = (
    "i = 0\n while i < 10: print(i)\n i += 1\n"
    " if i == 10: print('Hello')\n else: print('World')\n"
)
SECOND = (
    "i = 5\n for i in range(10): print(i)\n i +=1\n"
    " if i == 10: print(Hello)\n else: print(World)"
)

for token in tokenize(FIRST):
    print(token)
print("------")
for token in tokenize(SECOND):
    print(token)
