"""Configuration for flowcut components."""

from dataclasses import dataclass


@dataclass
class FlowConfig:
    """Tunables shared by the augmentation engine and the reporter."""

    # Emit one DEBUG record per augmenting path
    log_paths: bool = True

    # Minimum column width of text tables
    table_min_width: int = 6

    # Node labels longer than this are clipped in text tables
    max_label_width: int = 24

    # Include edges that carry no flow in the text edge table
    show_zero_flow: bool = True

    def clip_label(self, label: str) -> str:
        """Clip a label to ``max_label_width`` using an ASCII ellipsis."""
        if self.max_label_width < 4 or len(label) <= self.max_label_width:
            return label
        return label[: self.max_label_width - 3] + "..."


# Global configuration instance
FLOW_CONFIG = FlowConfig()
