from eleventy_gates.cli import gates_group

if __name__ == "__main__":
    gates_group()
