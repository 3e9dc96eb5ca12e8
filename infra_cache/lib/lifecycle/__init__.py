from .removal_policy import RemovalPolicy, removal_policy_options
