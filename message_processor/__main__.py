from message_processor.server import main

main()
