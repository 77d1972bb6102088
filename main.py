import sys

from rich.pretty import pprint

from parley import *

chat = Framework("!", debug=True)


def hello():
    if "color" in chat.kwargs:
        print(chat.kwargs["color"])
    if "state" in chat.kwargs:
        print(chat.kwargs["state"])


def world(*positionals):
    if not positionals:
        print("No positional arguments have been passed.")
    for index, argument in enumerate(positionals, 1):
        print(f"Positional Index: {index} | Positional Value: {argument!r}")
    for key, value in chat.kwargs.items():
        print(f"Key: {key}\nValue: {value!r}")


def echo(*positionals, **keywords):
    print(" ".join(map(str, positionals)))
    for name, value in keywords.items():
        print(f"Kwarg Name: {name} | Kwarg Value: {value!r}")


chat.add_command("hello", ACTIVATED, hello)
chat.add_command("world", ACTIVATED, world)
chat.add_command("print", ACTIVATED, echo, keywords=True)


if __name__ == '__main__':
    chat.process_command("!world hello world how are you doing?")
    chat.process_command("!world key1=value1 key2=value2 key3=value3")
    chat.process_command("!world pos1 key1=value1 pos2 pos3 key2=value2")
    chat.process_command("!hello color=red state=nil")
    pprint(chat)

    # Every line read from stdin stands in for a chat message body.
    for line in sys.stdin:
        chat.process_command(line.rstrip("\n"))
