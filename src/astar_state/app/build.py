# astar_state/app/build.py
from collections.abc import Mapping

from astar_state.app.protocols import SearchMap
from astar_state.config.models import SearchStateModel
from astar_state.io.search_logging import SearchLogging  # JSON logs
from astar_state.runtime.registries import make_open_set
from astar_state.search.hooks import NoopHooks
from astar_state.search.state import PathSearchState


def build_search_state(
    search_map: SearchMap,
    cfg: SearchStateModel | Mapping | None = None,
    *,
    use_logging: bool = True,
) -> PathSearchState:
    # 0) Validate config
    if cfg is None:
        model = SearchStateModel()
    elif isinstance(cfg, SearchStateModel):
        model = cfg
    else:
        model = SearchStateModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Open set backend
    open_set = make_open_set(model.open_set)

    return PathSearchState(search_map, open_set=open_set, hooks=hooks)
