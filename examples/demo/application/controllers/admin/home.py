class Home:
    def get_index(self):
        return "<h1>Admin</h1>"

    def get_stats(self):
        return "<h1>Admin stats</h1>"
