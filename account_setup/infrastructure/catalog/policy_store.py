from __future__ import annotations

import json
from typing import Any

from account_setup.application.ports.policy import PolicyPort


IAM_POLICY: dict[str, Any] = {
    "Version": "2012-10-17",
    "Statement": [
        {
            "Effect": "Allow",
            "Action": [
                "ec2:DescribeInstances",
                "ec2:StartInstances",
                "ec2:StopInstances",
                "rds:DescribeDBInstances",
                "rds:StartDBInstance",
                "rds:StopDBInstance",
            ],
            "Resource": "*",
        }
    ],
}


class StaticPolicyStore(PolicyPort):
    def __init__(self, policy: dict[str, Any] | None = None) -> None:
        self._policy = IAM_POLICY if policy is None else policy

    def get_policy_text(self) -> str:
        return json.dumps(self._policy, indent=2)
