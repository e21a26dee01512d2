"""A small example organization, used by ``org-chart --demo`` and the tests."""

from tree_builder.components.node import EmployeeNode

IC_IMAGE = "images/ic.png"
MANAGER_IMAGE = "images/dr.png"


def _ic(name: str, title: str) -> EmployeeNode:
    return EmployeeNode(name=name, title=title, image=IC_IMAGE)


SAMPLE_ORG = EmployeeNode(
    name="Top O the World",
    title="Everything",
    direct_reports=(
        _ic("IC1", "Director Something"),
        _ic("IC8", "Director In Title but not Function or Something in General"),
        EmployeeNode(
            name="Manager 1",
            title="Director Something Else",
            image=MANAGER_IMAGE,
            direct_reports=(
                _ic("IC2", "Individual Contributor"),
                _ic("IC3", "Individual Contributor"),
                _ic("IC4", "Individual Contributor"),
                EmployeeNode(
                    name="Manager 2",
                    title="That Manager!?",
                    image=MANAGER_IMAGE,
                    direct_reports=(
                        _ic("IC5", "Individual Contributor"),
                        EmployeeNode(
                            name="Manager3",
                            title="Which manager?",
                            image=MANAGER_IMAGE,
                            direct_reports=(
                                _ic("IC6", "Some Title"),
                                _ic("IC7", "Some Title Again"),
                            ),
                        ),
                    ),
                ),
            ),
        ),
        EmployeeNode(
            name="Manager 4",
            title="Director Something in Specific",
            image=MANAGER_IMAGE,
            direct_reports=(_ic("IC9", "It'll be fine?"),),
        ),
    ),
)
