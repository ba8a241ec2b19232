from typing import Any, List

from pydantic import BaseModel, Field

from indenty.tree import RoseTree


class IndentyBaseModel(BaseModel):
    class Config(BaseModel.Config):
        allow_population_by_field_name = True


class TreeModel(IndentyBaseModel):
    value: Any
    children: List['TreeModel'] = Field(default_factory=list)

    @classmethod
    def from_tree(cls, tree: RoseTree[Any]) -> 'TreeModel':
        return cls(value=tree.value, children=[cls.from_tree(c) for c in tree.children])

    def to_tree(self) -> RoseTree[Any]:
        return RoseTree(self.value, [c.to_tree() for c in self.children])


TreeModel.update_forward_refs()


class ForestModel(IndentyBaseModel):
    """
    A whole forest.  Serialized as `{"trees": [...]}`
    """
    trees: List[TreeModel] = Field(default_factory=list)

    @classmethod
    def from_forest(cls, forest: List[RoseTree[Any]]) -> 'ForestModel':
        return cls(trees=[TreeModel.from_tree(t) for t in forest])

    @classmethod
    def parse_data(cls, data: Any) -> 'ForestModel':
        """
        Accepts either `{"trees": [...]}`, a bare list of trees, or a single tree
        """
        if data is None:
            return cls()
        elif isinstance(data, list):
            return cls.parse_obj({'trees': data})
        elif isinstance(data, dict) and 'trees' not in data:
            return cls.parse_obj({'trees': [data]})
        else:
            return cls.parse_obj(data)

    def to_forest(self) -> List[RoseTree[Any]]:
        return [t.to_tree() for t in self.trees]
