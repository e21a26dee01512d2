from directory_connector import DirectoryConnector
from graph_renderer import render_graph
from tree_builder import BuildConfig, build_tree


def build_chart(user: str, title: str, config: BuildConfig, db: DirectoryConnector) -> str:
    root = build_tree(user, config, db)
    return render_graph(title, root)
