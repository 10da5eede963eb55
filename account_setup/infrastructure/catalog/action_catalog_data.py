from __future__ import annotations

from account_setup.domain.entities.action_tree import Action, ActionOption, ActionTree


def _action(action_id: str, name: str, options: list[tuple[str, str]]) -> Action:
    return Action(
        id=action_id,
        name=name,
        options=tuple(ActionOption(id=option_id, name=option_name, parent_id=action_id) for option_id, option_name in options),
    )


ACTION_TREE = ActionTree(
    actions=(
        _action(
            "start-stop-resources",
            "Start/Stop Resources",
            [
                ("ec2", "EC2"),
                ("rds", "RDS"),
                ("light-sail", "Light Sail"),
                ("amazon-neptune", "Amazon Neptune"),
            ],
        ),
        _action(
            "pause-resume-resource",
            "Pause/Resume Resource",
            [
                ("redshift-clusters", "Redshift Clusters"),
                ("aurora-serverless-v2", "Aurora Serverless v2"),
            ],
        ),
        _action(
            "resource-cleanup",
            "Resource Cleanup",
            [
                ("terminate-ec2", "Terminate EC2"),
                ("delete-ebs-volume", "Delete EBS Volume"),
                ("delete-ebs-snapshot", "Delete EBS Snapshot"),
                ("delete-rds", "Delete RDS"),
                ("delete-rds-snapshot", "Delete RDS Snapshot"),
            ],
        ),
    )
)
