from graph_renderer.render_graph import default_title, render_graph

__all__ = ["default_title", "render_graph"]
