from wingbeat import get_state


class Blog:
    def get_index(self):
        return "<h1>Blog</h1>"

    def get_post(self):
        params = get_state().params
        return f"<h1>Post {params[0] if params else '?'}</h1>"

    def post_post(self):
        return "<p>Saved</p>"
