from algokit.patterns.chain import FunctionHandler, Handler, build_chain
from algokit.patterns.command_bus import CommandBus
from algokit.patterns.events import EventEmitter
from algokit.patterns.pubsub import PubSub, Subscription
