from wingbeat import get_registry


class Demo:
    def hello(self):
        visits = get_registry().library("visits").count
        return f"Hello from the demo model (visit {visits})"
