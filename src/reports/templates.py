"""Static text shown in the reports and written to the analysis files."""

MEMORY_ANALYSIS_TEMPLATE = """\
# LLM MODEL MEMORY ANALYSIS

## Memory Metrics Explained

1. **Base Memory**: Minimum memory required to load the model
2. **Peak Memory**: Maximum memory used during inference
3. **Memory Delta**: Additional memory required for inference (Peak - Base)
4. **Tokens per MB**: Efficiency metric showing tokens generated per MB of memory
5. **System Memory %**: Percentage of total system memory used by the model

## Memory Optimization Techniques

1. **Quantization**: Reducing precision (fp16 → q8 → q6 → q5 → q4)
   - Each step down saves memory but may impact quality
   - Example: fp16 → q4 can reduce memory by 75%

2. **Model Pruning**: Removing unnecessary weights
   - Can reduce size by 20-30% with minimal quality impact

3. **Efficient Architectures**:
   - Mixture of Experts: Activates only relevant parts of model
   - Attention optimizations: Reduce memory needs for long contexts

4. **Hardware Considerations**:
   - CPU vs GPU memory characteristics
   - Dedicated vs shared memory systems
   - Memory bandwidth vs capacity tradeoffs

## Recommendations for Memory-Constrained Environments

1. Use smaller parameter models when possible (7B vs 70B)
2. Choose higher quantization levels (q4_K_M)
3. Limit context length for inference
4. Consider models specifically optimized for efficiency
"""

PERFORMANCE_ANALYSIS_TEMPLATE = """\
# LLM MODEL PERFORMANCE ANALYSIS

## Performance Metrics Explained

1. **Tokens per Second**: Raw text generation speed
   - Higher values indicate faster text generation
   - Directly impacts user-perceived response time
   - Varies by prompt complexity and model architecture

2. **CPU Utilization**: Processor resources consumed during inference
   - Lower values allow for better multitasking
   - High values indicate computation-intensive operations
   - Measured as percentage of available CPU resources

3. **Throughput Score**: Efficiency metric (tokens/sec ÷ CPU%)
   - Higher values indicate better performance per unit of compute
   - Useful for comparing models across different hardware
   - Key metric for cost-effective deployment

## Performance Optimization Strategies

1. **Quantization Tradeoffs**:
   - Each quantization level balances speed vs quality
   - fp16 → q8 → q6 → q5 → q4 progression shows increasing speed
   - Lower precision (q4) may show artifacts in complex reasoning

2. **Batching Requests**:
   - Processing multiple prompts simultaneously increases throughput
   - Increases memory requirements but improves overall efficiency
   - Optimal for high-volume applications

3. **Context Length Management**:
   - Shorter contexts process faster than longer ones
   - Consider splitting very long contexts when possible
   - Look for models with optimized attention mechanisms for long contexts

4. **Hardware Acceleration**:
   - GPU acceleration can provide 5-10x performance boost
   - Tensor processing units (TPUs) offer specialized acceleration
   - Model-specific optimizations can leverage specific hardware features

## Recommendations for Performance-Critical Applications

1. Choose models with higher throughput scores for cost-efficiency
2. Consider smaller parameter models for latency-sensitive applications
3. Use quantized models when generation speed is the primary concern
4. Evaluate hardware acceleration options for deployment
"""

MEMORY_USAGE_NOTES = [
    "- Memory footprint is primarily determined by model size (parameters)",
    "- Quantized models (q4, q5, q6) use less memory than full precision (fp16)",
    "- Memory efficiency (tokens/MB) measures how well a model uses its memory",
    "- Models with mixture-of-experts architecture may have higher memory needs",
    "- Memory usage increases with context length and batch size",
]

PERFORMANCE_METRIC_NOTES = [
    "- Tokens/Second: Raw generation speed (higher is better)",
    "- CPU %: Average processor utilization during inference",
    "- Throughput Score: Efficiency metric - tokens/sec per CPU% (higher is better)",
]

ARCHITECTURE_NOTES = [
    "- Larger models (70B+) typically have higher throughput but require more resources",
    "- Mixture-of-experts models (like Mixtral) often show better efficiency scores",
    "- Quantized models may have slightly lower tokens/sec but better efficiency",
    "- Instruction-tuned models (-instruct) prioritize quality over raw speed",
]
